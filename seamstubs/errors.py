"""Errors raised while setting up or consulting stubs and accessors."""

from typing import Any


class SeamStubsError(Exception):
    """Base class for all seamstubs errors."""


class ConfigurationError(SeamStubsError):
    """A stub, seam or accessor was declared in a way that can never work.

    Raised when the declaration is made, before any test reaches the code path.
    """


class StubFailure(SeamStubsError, AssertionError):
    """A call reached a stubbed seam and no value could be produced.

    Subclasses ``AssertionError`` so test runners report it as a failure.
    """

    def __init__(self, message: str, key, actual_args: list[Any] | None = None):
        super().__init__(message)
        self.key = key
        self.actual_args = actual_args


class NoStubsRegistered(StubFailure):
    """A seam was called with no stubs at all for its key."""

    def __init__(self, key):
        super().__init__(f"You did not set up any stubs for {key.describe()}", key)


class NoMatchingStub(StubFailure):
    """Stubs exist for the seam but none matches the actual arguments."""

    def __init__(self, key, actual_args: list[Any]):
        super().__init__(
            f"You did not set up a stub for {key.describe_call(actual_args)}",
            key,
            actual_args,
        )


class StreamExhausted(StubFailure):
    """A stream stub matched after all of its values were handed out."""

    def __init__(self, key, actual_args: list[Any]):
        super().__init__(
            f"There are no more stubbed values for {key.describe_call(actual_args)}",
            key,
            actual_args,
        )


class AccessorError(SeamStubsError):
    """A generated accessor could not reach its value."""


class MissingKey(AccessorError, KeyError):
    """The final key of a path is absent and no default was given."""

    def __init__(self, key: Any, container: Any):
        super().__init__(key)
        self.key = key
        self.container = container

    def __str__(self) -> str:
        return f"key {self.key!r} not found in: {self.container!r}"


class NotAContainer(AccessorError):
    """A traversal step landed on something that is neither a mapping nor pairs."""

    def __init__(self, value: Any, remaining: list[Any]):
        super().__init__(
            f"Trying to get {remaining!r} from inside {value!r}. "
            "Did you forget to make a stub?"
        )
        self.value = value
        self.remaining = remaining
