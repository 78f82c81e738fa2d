"""Execution contexts that own stubs.

Each context holds its own store and binder. The current one is tracked in a
``ContextVar``, so every asyncio task sees the context it was started with and
a fresh context installed inside a task stays inside that task.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field

from seamstubs.stubs.binder import SeamBinder
from seamstubs.stubs.store import StubStore

logger = logging.getLogger(__name__)


@dataclass
class StubContext:
    """The stubs and seam bindings of one execution context, e.g. one test."""

    store: StubStore = field(default_factory=StubStore)
    binder: SeamBinder = field(default_factory=SeamBinder)


_current: ContextVar[StubContext] = ContextVar("seamstubs_context")


def current_context() -> StubContext:
    """Return the current context, creating one if none is installed."""
    try:
        return _current.get()
    except LookupError:
        context = StubContext()
        _current.set(context)
        logger.debug("Created stub context on first use")
        return context


def peek_context() -> StubContext | None:
    """Return the current context without creating one."""
    return _current.get(None)


def use_context(context: StubContext) -> Token:
    """Install ``context`` as current; pass the token to ``restore_context``."""
    return _current.set(context)


def restore_context(token: Token) -> None:
    _current.reset(token)


@contextmanager
def stub_context(context: StubContext | None = None) -> Iterator[StubContext]:
    """Run a block with its own stubs, restoring the previous context after.

    Args:
        context: Context to install; a fresh one if None

    Yields:
        The installed context
    """
    if context is None:
        context = StubContext()
    token = use_context(context)
    try:
        yield context
    finally:
        restore_context(token)
