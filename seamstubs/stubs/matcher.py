"""Match actual call arguments against stub argument specs."""

import re
from collections.abc import Mapping
from typing import Any


def any_value(_value: Any) -> bool:
    """Predicate that accepts every argument."""
    return True


ANY_ARG = any_value


def is_predicate(spec: Any) -> bool:
    """Callables are predicates, except classes, which are matched as values."""
    return callable(spec) and not isinstance(spec, type)


def argument_matches(actual: Any, spec: Any) -> bool:
    """Decide whether one actual argument satisfies one spec.

    Predicates are applied and their result tested for truthiness. A compiled
    regex matches any string it finds a match in. Mappings, lists and tuples
    are compared element by element so specs may nest predicates. Anything
    else falls back to ``==``, which lets ``pytest.approx`` and
    ``unittest.mock.ANY`` act as specs.
    """
    if is_predicate(spec):
        return bool(spec(actual))

    if isinstance(spec, re.Pattern) and isinstance(actual, str):
        return spec.search(actual) is not None

    if isinstance(spec, Mapping) and isinstance(actual, Mapping):
        if set(spec.keys()) != set(actual.keys()):
            return False
        return all(argument_matches(actual[k], spec[k]) for k in spec)

    if isinstance(spec, list) and isinstance(actual, list):
        return _items_match(actual, spec)

    if isinstance(spec, tuple) and isinstance(actual, tuple):
        return _items_match(actual, spec)

    return spec == actual


def _items_match(actual, spec) -> bool:
    if len(spec) != len(actual):
        return False
    return all(argument_matches(a, s) for a, s in zip(actual, spec))


VALUE_TYPES = (type(None), bool, int, float, complex, str, bytes)


def same_spec(a: Any, b: Any) -> bool:
    """Decide whether two specs are structurally identical.

    Unlike ``==``, a type mismatch is never equal (``1`` is not ``True`` or
    ``1.0``). Predicates, patterns and any object that is not a plain value or
    container are equal only to themselves, so permissive ``__eq__``
    implementations such as ``mock.ANY`` or ``pytest.approx`` never count.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if type(a) is dict:
        if set(a.keys()) != set(b.keys()):
            return False
        return all(same_spec(a[k], b[k]) for k in a)

    if type(a) in (list, tuple):
        return len(a) == len(b) and all(same_spec(x, y) for x, y in zip(a, b))

    if type(a) in VALUE_TYPES:
        return a == b
    return False


def same_specs(a, b) -> bool:
    """Spec-list version of ``same_spec``."""
    return len(a) == len(b) and all(same_spec(x, y) for x, y in zip(a, b))


def matches(arg_specs, actual_args) -> bool:
    """Return True if every actual argument satisfies the spec at its position.

    Args:
        arg_specs: One spec per parameter position
        actual_args: The arguments of a concrete call

    Returns:
        True when all positions match

    Raises:
        ValueError: If the two lists differ in length
    """
    if len(arg_specs) != len(actual_args):
        raise ValueError(
            f"Cannot match {len(actual_args)} arguments against "
            f"{len(arg_specs)} argument specs"
        )
    return all(argument_matches(a, s) for a, s in zip(actual_args, arg_specs))
