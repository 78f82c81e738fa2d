"""Tests for path parsing and container traversal."""

import pytest

from seamstubs.errors import ConfigurationError, MissingKey, NotAContainer
from seamstubs.getters.path import NO_DEFAULT, Segment, parse_path, to_segment
from seamstubs.getters.traversal import container_kind, fetch, get_leaf


class TestParsePath:
    def test_plain_keys_and_pairs(self):
        segments = parse_path(["a", ("b", 0)])
        assert segments == (Segment("a"), Segment("b", 0))
        assert not segments[0].has_default
        assert segments[1].has_default

    def test_none_is_a_valid_default(self):
        assert to_segment(("b", None)).default is None
        assert to_segment("b").default is NO_DEFAULT

    def test_tuple_keys_need_explicit_segments(self):
        """A 2-tuple key would read as a (key, default) pair, so wrap it."""
        [segment] = parse_path([Segment(("x", "y"))])
        assert segment.key == ("x", "y")
        assert not segment.has_default

    def test_path_must_be_a_list(self):
        with pytest.raises(ConfigurationError):
            parse_path("a")


class TestContainerKind:
    @pytest.mark.parametrize(
        "value, kind",
        [
            ({}, "mapping"),
            ({"a": 1}, "mapping"),
            ([("a", 1)], "pairs"),
            ((("a", 1), ("b", 2)), "pairs"),
            ([], "pairs"),
            ([1, 2], None),
            ([("a", 1, 2)], None),
            ("ab", None),
            (5, None),
            (None, None),
        ],
    )
    def test_kinds(self, value, kind):
        assert container_kind(value) == kind


class TestFetch:
    def test_first_pair_wins(self):
        assert fetch([("a", 1), ("a", 2)], "a") == 1

    def test_default_for_absent_key(self):
        assert fetch({"a": 1}, "b", "d") == "d"
        assert fetch([("a", 1)], "b", "d") == "d"

    def test_missing_key_without_default(self):
        with pytest.raises(MissingKey) as exc_info:
            fetch({"a": 1}, "b")
        assert exc_info.value.key == "b"
        assert "'b'" in str(exc_info.value)


class TestGetLeaf:
    def test_reports_remaining_path(self):
        """The error names the keys that could not be reached."""
        with pytest.raises(NotAContainer) as exc_info:
            get_leaf({"a": 5}, parse_path(["a", "b", "c"]))
        assert exc_info.value.value == 5
        assert exc_info.value.remaining == ["b", "c"]

    def test_non_container_root(self):
        with pytest.raises(NotAContainer):
            get_leaf("running", parse_path(["a"]))

    def test_non_container_takes_priority_over_default(self):
        """A default only covers an absent key, not a missing container."""
        with pytest.raises(NotAContainer):
            get_leaf({"a": 5}, parse_path(["a", ("b", "d")]))
