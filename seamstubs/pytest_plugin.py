"""pytest plugin: every test gets its own stub context.

Enable it with ``-p seamstubs.pytest_plugin`` or, in a root ``conftest.py``::

    pytest_plugins = ["seamstubs.pytest_plugin"]

ini options:
    seamstubs_report: attach the stub table to failing tests' reports
        (default: true)
"""

import logging

import pytest

from seamstubs.context import StubContext, restore_context, use_context
from seamstubs.diagnostics import dump_stubs

logger = logging.getLogger(__name__)

CONTEXT_KEY = pytest.StashKey[StubContext]()

REPORT_SECTION = "seamstubs"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the plugin's ini options."""
    parser.addini(
        "seamstubs_report",
        type="bool",
        default=True,
        help="Attach the registered stubs to the report of a failing test.",
    )


@pytest.fixture(autouse=True)
def seamstubs_context(request: pytest.FixtureRequest):
    """Install a fresh stub context for the test and yield it."""
    context = StubContext()
    request.node.stash[CONTEXT_KEY] = context
    token = use_context(context)
    logger.debug(f"Installed stub context for {request.node.nodeid}")
    yield context
    restore_context(token)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.failed:
        return
    if not item.config.getini("seamstubs_report"):
        return

    context = item.stash.get(CONTEXT_KEY, None)
    if context is None:
        return
    table = dump_stubs(context)
    if table:
        report.sections.append((REPORT_SECTION, table))
