"""Tests for interpolation search and its linear specialization."""

from __future__ import annotations

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from binary_search import (
    UnsortedInputError,
    interpolation_search,
    linear_estimate,
    linear_interpolation_search,
    search_inputs,
)

ARR = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def _scaled_estimate(span):
    """Classic estimator that knows the index span; used to exercise large jumps."""
    def estimate(target, left_value, right_value):
        return (target - left_value) * span // (right_value - left_value)
    return estimate


def _without_left_match(target, sequence, estimator):
    # interpolation search minus the in-loop left-bound short circuit
    if not sequence:
        return None
    left, right = 0, len(sequence) - 1
    while left <= right and sequence[left] < target < sequence[right]:
        offset = estimator(target, sequence[left], sequence[right])
        middle = max(left, min(right, left + offset))
        if sequence[middle] == target:
            return middle
        if sequence[middle] < target:
            left = middle + 1
        else:
            right = middle - 1
    if left <= right:
        if sequence[left] == target:
            return left
        if sequence[right] == target:
            return right
    return None


# ---------------------------------------------------------------------------
# interpolation_search
# ---------------------------------------------------------------------------

class TestInterpolationSearch:
    def test_panics_when_arr_is_not_sorted(self):
        with pytest.raises(UnsortedInputError, match="Interpolation search encountered a sequence that is not sorted"):
            interpolation_search(5, [1, 3, 2, 5], linear_estimate)

    def test_empty(self):
        assert interpolation_search(5, [], linear_estimate) is None

    def test_target_in_arr(self):
        assert interpolation_search(5, ARR, linear_estimate) == 4

    def test_target_not_in_arr(self):
        assert interpolation_search(11, ARR, linear_estimate) is None

    def test_target_on_the_bounds(self):
        assert interpolation_search(1, ARR, linear_estimate) == 0
        assert interpolation_search(10, ARR, linear_estimate) == 9

    def test_target_in_gap(self):
        assert interpolation_search(6, [1, 3, 5, 7, 9], linear_estimate) is None

    def test_custom_estimator(self):
        xs = list(range(0, 1000, 10))
        assert interpolation_search(730, xs, _scaled_estimate(len(xs) - 1)) == 73

    def test_out_of_range_offsets_are_clamped(self):
        assert interpolation_search(5, ARR, lambda t, lo, hi: 1000) == 4
        assert interpolation_search(5, ARR, lambda t, lo, hi: -1000) == 4

    def test_estimator_not_called_on_equal_bounds(self):
        def estimator(target, left_value, right_value):
            assert left_value != right_value
            return 0
        assert interpolation_search(4, [4, 4, 4, 4], estimator) == 0

    def test_postcondition_ignores_estimator_argument(self):
        calls = []

        def estimator(target, left_value, right_value):
            calls.append(target)
            return 0
        assert interpolation_search(7, ARR, estimator) == 6
        assert interpolation_search(0, ARR, estimator) is None
        assert calls


# ---------------------------------------------------------------------------
# linear_interpolation_search
# ---------------------------------------------------------------------------

class TestLinearInterpolationSearch:
    def test_literal(self):
        assert linear_interpolation_search(5, ARR) == 4

    def test_floats(self):
        assert linear_interpolation_search(2.5, [0.5, 1.5, 2.5, 3.5]) == 2

    def test_miss(self):
        assert linear_interpolation_search(2.0, [0.5, 1.5, 2.5, 3.5]) is None

    def test_panics_when_arr_is_not_sorted(self):
        with pytest.raises(UnsortedInputError):
            linear_interpolation_search(5, [1, 3, 2, 5])

    def test_infinite_bounds(self):
        assert linear_interpolation_search(-5.0, [-math.inf, 0.0]) is None
        assert linear_interpolation_search(0.0, [-math.inf, 0.0, 1.0]) == 1
        assert linear_interpolation_search(2.0, [-math.inf, 1.0, 2.0, math.inf]) == 2


# ---------------------------------------------------------------------------
# linear_estimate
# ---------------------------------------------------------------------------

class TestLinearEstimate:
    def test_offset_within_bounds(self):
        assert linear_estimate(5, 1, 10) == 0
        assert linear_estimate(2.5, 0.0, 2.0) == 1

    def test_non_finite_fraction_gives_zero_offset(self):
        assert linear_estimate(-5.0, -math.inf, 0.0) == 0
        assert linear_estimate(0.0, -math.inf, math.inf) == 0


# ---------------------------------------------------------------------------
# Left-bound short circuit
# ---------------------------------------------------------------------------

class TestLeftMatchShortCircuit:
    @given(search_inputs())
    def test_linear_result_unchanged_without_it(self, kwargs):
        assert interpolation_search(estimator=linear_estimate, **kwargs) == _without_left_match(
            estimator=linear_estimate, **kwargs
        )

    @given(search_inputs(), st.integers(1, 40))
    def test_scaled_result_unchanged_without_it(self, kwargs, span):
        estimator = _scaled_estimate(span)
        assert interpolation_search(estimator=estimator, **kwargs) == _without_left_match(
            estimator=estimator, **kwargs
        )
