"""Accessor paths: the keys an accessor descends through."""

from dataclasses import dataclass
from typing import Any

from seamstubs.errors import ConfigurationError

MAX_DEPTH = 3


class _NoDefault:
    def __repr__(self) -> str:
        return "<no default>"


NO_DEFAULT = _NoDefault()


@dataclass(frozen=True)
class Segment:
    """One step of a path: a key, plus the value to use if it is absent."""

    key: Any
    default: Any = NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


def to_segment(item: Any) -> Segment:
    """Read a path item: a Segment, a ``(key, default)`` pair, or a plain key.

    A key that is itself a 2-tuple must be wrapped in ``Segment`` explicitly.
    """
    if isinstance(item, Segment):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Segment(item[0], item[1])
    return Segment(item)


def parse_path(path) -> tuple[Segment, ...]:
    """Validate a path and convert its items to segments.

    Raises:
        ConfigurationError: If the path is not 1 to MAX_DEPTH items long or a
            default is attached anywhere but the last item
    """
    if not isinstance(path, (list, tuple)):
        raise ConfigurationError(f"An accessor path must be a list, not {path!r}")

    segments = tuple(to_segment(item) for item in path)
    if not 1 <= len(segments) <= MAX_DEPTH:
        raise ConfigurationError(
            f"An accessor path has 1 to {MAX_DEPTH} keys; got {len(segments)}"
        )
    for segment in segments[:-1]:
        if segment.has_default:
            raise ConfigurationError(
                f"Only the last key of a path may have a default; "
                f"{segment.key!r} has {segment.default!r}"
            )
    return segments
