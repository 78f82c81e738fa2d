"""Human-readable views of registered stubs."""

import logging
from typing import Any

from seamstubs.context import StubContext, peek_context
from seamstubs.stubs.matcher import is_predicate
from seamstubs.stubs.models import StubEntry

logger = logging.getLogger(__name__)


def describe_spec(spec: Any) -> str:
    """Render a spec; predicates show their name rather than their repr."""
    if is_predicate(spec):
        name = getattr(spec, "__qualname__", None) or type(spec).__name__
        return f"<{name}>"
    return repr(spec)


def describe_entry(entry: StubEntry) -> str:
    specs = ", ".join(describe_spec(s) for s in entry.arg_specs)
    return f"({specs}) {entry.mode.value}: {entry.payload!r}"


def dump_stubs(context: StubContext | None = None) -> str:
    """Render every stub of a context, one block per seam.

    Args:
        context: Context to render; the current one if None

    Returns:
        The stub table, or an empty string if there are no stubs
    """
    if context is None:
        context = peek_context()
    if context is None or not len(context.store):
        return ""

    lines = []
    for key in context.store.keys():
        lines.append(key.describe())
        for index, entry in enumerate(context.store.entries(key)):
            lines.append(f"  #{index} {describe_entry(entry)}")
    logger.debug(f"Dumped stubs for {len(context.store)} seams")
    return "\n".join(lines)
