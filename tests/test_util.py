"""Tests for the sortedness check and reporting helpers."""

from __future__ import annotations

import dataclasses

from binary_search._util import _jsonable, _qualified_name, _safe_call, is_sorted


# ---------------------------------------------------------------------------
# is_sorted
# ---------------------------------------------------------------------------

class TestIsSorted:
    def test_empty(self):
        assert is_sorted([]) is True

    def test_one_element(self):
        assert is_sorted([1]) is True

    def test_sorted(self):
        assert is_sorted([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]) is True

    def test_duplicates_are_sorted(self):
        assert is_sorted([1, 2, 4, 4, 4, 5]) is True

    def test_unsorted(self):
        assert is_sorted([1, 2, 3, 5, 4, 6, 7, 8, 9, 10]) is False

    def test_tuples_and_strings(self):
        assert is_sorted(("a", "b", "b", "c")) is True
        assert is_sorted("abdc") is False


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_qualified_name(self):
        assert _qualified_name(is_sorted) == "binary_search._util.is_sorted"

    def test_jsonable_nested(self):
        assert _jsonable({"xs": (1, 2), 3: None}) == {"xs": [1, 2], "3": None}

    def test_jsonable_dataclass(self):
        @dataclasses.dataclass
        class Point:
            x: int
            y: int

        assert _jsonable(Point(1, 2)) == {"__dataclass__": "Point", "x": 1, "y": 2}

    def test_jsonable_falls_back_to_repr(self):
        assert _jsonable({1, 2}) == repr({1, 2})

    def test_safe_call_reports_exceptions(self):
        ok, err = _safe_call(lambda x: 1 / x, 0)
        assert ok is False
        assert err.startswith("ZeroDivisionError")

    def test_safe_call_passes_through(self):
        assert _safe_call(lambda x: x > 0, 1) == (True, None)
