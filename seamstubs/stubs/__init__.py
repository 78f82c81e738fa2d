"""Stub registry: keys, matching, storage and return calculators."""

from seamstubs.stubs.binder import SeamBinder
from seamstubs.stubs.calculator import MAX_ARITY, make_calculator
from seamstubs.stubs.matcher import (
    ANY_ARG,
    any_value,
    argument_matches,
    matches,
    same_spec,
    same_specs,
)
from seamstubs.stubs.models import Mode, StubEntry, StubKey
from seamstubs.stubs.store import StubStore, add_stub, consume_stub

__all__ = [
    # Models
    "StubKey",
    "Mode",
    "StubEntry",
    # Matching
    "ANY_ARG",
    "any_value",
    "argument_matches",
    "matches",
    "same_spec",
    "same_specs",
    # Storage
    "StubStore",
    "add_stub",
    "consume_stub",
    # Calculators and binding
    "MAX_ARITY",
    "make_calculator",
    "SeamBinder",
]
