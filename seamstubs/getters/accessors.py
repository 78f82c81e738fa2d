"""Generate getter functions that hide the shape of nested structures.

    all = {
        "top1": 1,
        "down": {"lower": 2, "down": [("lowest", 3)]},
    }

    top1, = getters(["top1"])
    lowest, = getters("down", "down", ["lowest"])
    lower = getter("lower", for_=["down", "lower"], default=0)

    top1(all)    # 1
    lowest(all)  # 3

Levels may be any mix of mappings and sequences of key/value pairs. A missing
key raises ``MissingKey`` unless the last key has a default. Getters built by
``getter``/``getters`` are seams, so tests can stub them with ``given``
instead of building the whole structure.
"""

import logging
import sys
from collections.abc import Callable
from typing import Any

from seamstubs.errors import ConfigurationError
from seamstubs.getters.path import NO_DEFAULT, Segment, parse_path, to_segment
from seamstubs.getters.traversal import get_leaf
from seamstubs.seam import seam

logger = logging.getLogger(__name__)


def build_accessor(path) -> Callable[[Any], Any]:
    """Build a pure function that reads ``path`` out of a root structure.

    Args:
        path: 1 to 3 keys; the last may be a ``(key, default)`` pair

    Returns:
        A function of one argument, the root

    Raises:
        ConfigurationError: If the path is malformed
    """
    segments = parse_path(path)

    def accessor(root):
        return get_leaf(root, segments)

    accessor.segments = segments
    return accessor


def getter(name: str, *, for_, default: Any = NO_DEFAULT, module: str | None = None):
    """Define one stubbable getter, named independently of the key it reads.

        raiz = getter("raiz", for_="root")
        do_meio = getter("do_meio", for_=["root", "middle"], default="default")

    Args:
        name: The getter's name, also its seam name
        for_: A key, or a list or tuple of up to 3 keys; a key that is itself
            a tuple must be wrapped in ``Segment``
        default: Value for an absent last key
        module: Owning module; defaults to the caller's
    """
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")
    keys = list(for_) if isinstance(for_, (list, tuple)) else [for_]
    if not keys:
        raise ConfigurationError(f"getter {name!r} needs at least one key")
    if default is not NO_DEFAULT:
        keys[-1] = Segment(keys[-1], default)
    return _define(name, keys, module)


def getters(*levels, module: str | None = None) -> tuple:
    """Define one stubbable getter per name, all under the same path prefix.

        t1, t2 = getters(["t1", ("t2", "default")])
        bottom, = getters("top", "middle", ["bottom"])

    Args:
        *levels: Zero to two prefix keys, then the list of names; a name may
            be a ``(name, default)`` pair
        module: Owning module; defaults to the caller's

    Returns:
        The getters, in the order of the names
    """
    if not levels or not isinstance(levels[-1], list):
        raise ConfigurationError("getters() needs a list of names as its last argument")
    if module is None:
        module = sys._getframe(1).f_globals.get("__name__", "__main__")

    *prefix, names = levels
    defined = []
    for item in names:
        segment = to_segment(item)
        if not isinstance(segment.key, str):
            raise ConfigurationError(
                f"getters() names must be strings; use getter() for {segment.key!r}"
            )
        defined.append(_define(segment.key, [*prefix, segment], module))
    return tuple(defined)


def _define(name: str, path: list, module: str):
    accessor = build_accessor(path)

    def read(root):
        return accessor(root)

    read.__name__ = read.__qualname__ = name
    read.__module__ = module
    read.__doc__ = f"Read {[s.key for s in accessor.segments]!r} from a structure."
    logger.debug(f"Defined getter {module}.{name} for {accessor.segments!r}")
    return seam(read, owner=module, name=name)
