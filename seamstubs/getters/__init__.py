"""Getters into nested mappings and key/value pair sequences."""

from seamstubs.getters.accessors import build_accessor, getter, getters
from seamstubs.getters.path import MAX_DEPTH, NO_DEFAULT, Segment, parse_path
from seamstubs.getters.traversal import container_kind, fetch, get_leaf

__all__ = [
    # Paths
    "Segment",
    "NO_DEFAULT",
    "MAX_DEPTH",
    "parse_path",
    # Traversal
    "container_kind",
    "fetch",
    "get_leaf",
    # Generation
    "build_accessor",
    "getter",
    "getters",
]
