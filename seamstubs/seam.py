"""Mark functions as seams whose calls tests can redirect to stubs.

A seam behaves exactly like the function it wraps until a test binds a
calculator for it in the current context. From then on, calls whose
positional arity has a calculator are answered by that calculator instead.
"""

import functools
import inspect
import logging
from dataclasses import dataclass

from seamstubs.context import current_context, peek_context
from seamstubs.errors import ConfigurationError
from seamstubs.stubs.models import StubKey

logger = logging.getLogger(__name__)

SEAM_ATTRIBUTE = "__seam__"

_UNSUPPORTED_KINDS = (inspect.Parameter.KEYWORD_ONLY, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class SeamIdentity:
    """The owner and name shared by every arity of one seam."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}.{self.name}"


def seam(func=None, *, owner: str | None = None, name: str | None = None):
    """Decorator that turns a function into a stubbable seam.

    Can be used bare (``@seam``) or with arguments (``@seam(name="fetch")``).

    Args:
        func: The function to wrap
        owner: Owner identity; defaults to the function's module
        name: Seam name; defaults to the function's qualified name

    Raises:
        ConfigurationError: If the function has keyword-only or ``**kwargs``
            parameters, which cannot be matched positionally
    """
    if func is None:
        return functools.partial(seam, owner=owner, name=name)

    signature = inspect.signature(func)
    for param in signature.parameters.values():
        if param.kind in _UNSUPPORTED_KINDS:
            raise ConfigurationError(
                f"{func.__qualname__} cannot be a seam: parameter "
                f"'{param.name}' is not positional"
            )

    identity = SeamIdentity(owner or func.__module__, name or func.__qualname__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        context = peek_context()
        if context is None or not context.binder.is_bound(
            identity.owner, identity.name
        ):
            return func(*args, **kwargs)

        bound = signature.bind(*args, **kwargs)
        if bound.kwargs:
            raise ConfigurationError(
                f"Call to stubbed seam {identity} passes "
                f"{sorted(bound.kwargs)} by keyword after a skipped argument; "
                "stubs match positional arguments only"
            )

        key = StubKey(identity.owner, identity.name, len(bound.args))
        calculator = context.binder.calculator_for(key)
        if calculator is None:
            return func(*args, **kwargs)
        logger.debug(f"Redirecting {key.describe_call(list(bound.args))} to stubs")
        return calculator(*bound.args)

    setattr(wrapper, SEAM_ATTRIBUTE, identity)
    return wrapper


def is_seam(target) -> bool:
    return getattr(target, SEAM_ATTRIBUTE, None) is not None


def seam_identity(target) -> SeamIdentity:
    """Return the identity carried by a seam.

    Raises:
        ConfigurationError: If ``target`` was not decorated with ``@seam``
    """
    identity = getattr(target, SEAM_ATTRIBUTE, None)
    if identity is None:
        raise ConfigurationError(
            f"{target!r} is not a seam; decorate it with @seam to stub it"
        )
    return identity


def bind(owner: str, name: str, arity: int, calculator) -> StubKey:
    """Bind ``calculator`` to a seam in the current context."""
    return current_context().binder.bind(owner, name, arity, calculator)
