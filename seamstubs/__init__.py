"""Context-scoped call stubbing and stubbable getters for tests."""

from seamstubs.context import (
    StubContext,
    current_context,
    stub_context,
    use_context,
)
from seamstubs.diagnostics import dump_stubs
from seamstubs.errors import (
    AccessorError,
    ConfigurationError,
    MissingKey,
    NoMatchingStub,
    NoStubsRegistered,
    NotAContainer,
    SeamStubsError,
    StreamExhausted,
    StubFailure,
)
from seamstubs.getters import Segment, build_accessor, getter, getters
from seamstubs.given import given, given_getters
from seamstubs.seam import bind, seam
from seamstubs.stubs import (
    ANY_ARG,
    Mode,
    SeamBinder,
    StubEntry,
    StubKey,
    StubStore,
    add_stub,
    any_value,
    consume_stub,
    make_calculator,
    matches,
)

__all__ = [
    # Stubbing
    "seam",
    "given",
    "given_getters",
    "ANY_ARG",
    "any_value",
    # Registry
    "StubKey",
    "Mode",
    "StubEntry",
    "StubStore",
    "SeamBinder",
    "matches",
    "add_stub",
    "consume_stub",
    "make_calculator",
    "bind",
    # Contexts
    "StubContext",
    "current_context",
    "stub_context",
    "use_context",
    "dump_stubs",
    # Getters
    "Segment",
    "build_accessor",
    "getter",
    "getters",
    # Errors
    "SeamStubsError",
    "ConfigurationError",
    "StubFailure",
    "NoStubsRegistered",
    "NoMatchingStub",
    "StreamExhausted",
    "AccessorError",
    "MissingKey",
    "NotAContainer",
]
