"""Walk a path through nested mappings and key/value pair sequences."""

import logging
from collections.abc import Mapping
from typing import Any

from seamstubs.errors import MissingKey, NotAContainer
from seamstubs.getters.path import NO_DEFAULT, Segment

logger = logging.getLogger(__name__)


def is_pairs(value: Any) -> bool:
    """A list or tuple made only of 2-tuples, like ``[("a", 1), ("b", 2)]``."""
    return isinstance(value, (list, tuple)) and all(
        isinstance(item, tuple) and len(item) == 2 for item in value
    )


def container_kind(value: Any) -> str | None:
    """Return "mapping", "pairs", or None for anything that is not a container."""
    if isinstance(value, Mapping):
        return "mapping"
    if is_pairs(value):
        return "pairs"
    return None


def fetch(container: Any, key: Any, default: Any = NO_DEFAULT) -> Any:
    """Get ``key`` from a mapping or pair sequence.

    For pairs, the first pair with the key wins.

    Raises:
        MissingKey: If the key is absent and no default was given
    """
    if isinstance(container, Mapping):
        if key in container:
            return container[key]
    else:
        for candidate, value in container:
            if candidate == key:
                return value

    if default is NO_DEFAULT:
        raise MissingKey(key, container)
    return default


def get_leaf(root: Any, segments: tuple[Segment, ...]) -> Any:
    """Descend from ``root`` through every segment.

    Every level, the last included, must be a container. Only the last
    segment can carry a default.

    Raises:
        NotAContainer: If a level is neither a mapping nor pairs
        MissingKey: If a key is absent and its segment has no default
    """
    current = root
    for index, segment in enumerate(segments):
        if container_kind(current) is None:
            remaining = [s.key for s in segments[index:]]
            logger.debug(f"Hit non-container {current!r} with {remaining!r} to go")
            raise NotAContainer(current, remaining)
        current = fetch(current, segment.key, segment.default)
    return current
