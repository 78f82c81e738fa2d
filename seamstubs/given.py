"""Declare what a seam returns for particular arguments.

    given(Dates.add, date(2001, 2, 3), 3, returns="return for 3")
    given(Dates.add, date(2001, 2, 3), ANY_ARG, returns="any count")
    given(Maps.get, ANY_ARG, ANY_ARG, stream=[3, 4])

Arguments are literals compared with ``==`` or predicates called with the
actual argument. If more than one stub matches, the first registered wins;
giving the same arguments again replaces the earlier stub in its place.
"""

import inspect
import logging
from typing import Any

from seamstubs.context import current_context
from seamstubs.errors import ConfigurationError
from seamstubs.seam import seam_identity
from seamstubs.stubs.calculator import make_calculator
from seamstubs.stubs.models import Mode, StubKey

logger = logging.getLogger(__name__)

_UNSET = object()


def given(target, *arg_specs: Any, returns: Any = _UNSET, stream: Any = _UNSET) -> None:
    """Stub a seam for calls whose arguments match ``arg_specs``.

    Args:
        target: A function decorated with ``@seam``, or a bound method of one
            (the instance is then matched as the first argument)
        *arg_specs: One literal or predicate per positional argument
        returns: Value returned on every matching call
        stream: Values returned one per matching call, in order

    Raises:
        ConfigurationError: If both or neither of ``returns``/``stream`` are
            given, if ``target`` is not a seam, or if the arguments cannot fit
            its signature
    """
    if (returns is _UNSET) == (stream is _UNSET):
        raise ConfigurationError("given() takes exactly one of returns= or stream=")

    identity = seam_identity(target)
    function = target
    if inspect.ismethod(target):
        arg_specs = (target.__self__, *arg_specs)
        function = target.__func__

    try:
        inspect.signature(function).bind(*arg_specs)
    except TypeError as e:
        raise ConfigurationError(f"Arguments do not fit {identity}: {e}") from e

    key = StubKey(identity.owner, identity.name, len(arg_specs))
    calculator = make_calculator(key, key.arity)

    if returns is not _UNSET:
        mode, payload = Mode.RETURN, returns
    else:
        mode, payload = Mode.STREAM, stream

    context = current_context()
    context.store.add_stub(key, arg_specs, mode, payload)
    context.binder.bind(key.owner, key.name, key.arity, calculator)
    logger.debug(f"given {key.describe()} -> {mode.value}")


def given_getters(namespace, root: Any, **values: Any) -> None:
    """Stub several one-argument getters applied to the same root at once.

        given_getters(running_example, "running", name="example", neighborhood={})

    is shorthand for one ``given(running_example.<name>, "running", returns=...)``
    per keyword.

    Raises:
        ConfigurationError: If ``namespace`` has no attribute for a keyword
    """
    for name, value in values.items():
        target = getattr(namespace, name, None)
        if target is None:
            raise ConfigurationError(f"Unknown getter {name!r} in {namespace!r}")
        given(target, root, returns=value)
