"""Build the callables that answer stubbed seams."""

import inspect
import logging
from collections.abc import Callable
from typing import Any

from seamstubs.errors import ConfigurationError
from seamstubs.stubs.models import StubKey

logger = logging.getLogger(__name__)

# Seams taking more positional arguments than this cannot be stubbed.
MAX_ARITY = 6


def make_calculator(key: StubKey, arity: int, store=None) -> Callable[..., Any]:
    """Build a callable that looks up stubbed values for ``key``.

    Args:
        key: The seam the calculator answers for
        arity: Exact number of positional arguments the calculator accepts
        store: Store to consult; None means the current context's store at
            call time

    Returns:
        A function of ``arity`` positional arguments

    Raises:
        ConfigurationError: If arity is outside 0..MAX_ARITY
    """
    if not 0 <= arity <= MAX_ARITY:
        raise ConfigurationError(
            f"Stubs work only for functions with {MAX_ARITY} or fewer "
            f"arguments; {key.describe()} has {arity}"
        )

    def calculator(*args):
        if len(args) != arity:
            raise TypeError(
                f"calculator for {key.describe()} takes {arity} positional "
                f"arguments but {len(args)} were given"
            )
        if store is not None:
            return store.consume_stub(key, list(args))

        from seamstubs.context import current_context

        return current_context().store.consume_stub(key, list(args))

    calculator.__name__ = calculator.__qualname__ = f"{key.name}_calculator"
    calculator.__signature__ = inspect.Signature(
        [
            inspect.Parameter(f"a{i}", inspect.Parameter.POSITIONAL_ONLY)
            for i in range(1, arity + 1)
        ]
    )
    logger.debug(f"Built calculator for {key.describe()}")
    return calculator
