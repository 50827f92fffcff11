"""Interpolation search with a pluggable midpoint estimator.

The estimator is a plain callable ``estimator(target, left_value,
right_value) -> int`` returning an offset from the current left bound. It is
only called while ``left_value < target < right_value``, so a linear
estimator never divides by zero on sorted input.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Any

from binary_search._contracts import ensures, sorted_input
from binary_search._core import _holds_target

Estimator = Callable[[Any, Any, Any], int]


def linear_estimate(target: Any, left_value: Any, right_value: Any) -> int:
    fraction = (target - left_value) / (right_value - left_value)
    # infinite bounds give inf/inf; fall back to probing the left bound
    if not math.isfinite(fraction):
        return 0
    return int(fraction)


@sorted_input("Interpolation search")
@ensures(_holds_target)
def interpolation_search(target: Any, sequence: Sequence[Any], estimator: Estimator) -> int | None:
    """Find ``target`` using ``estimator`` to choose each probe.

    >>> interpolation_search(5, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10], linear_estimate)
    4
    """
    if not sequence:
        return None

    left, right = 0, len(sequence) - 1
    while left <= right and sequence[left] < target < sequence[right]:
        offset = estimator(target, sequence[left], sequence[right])
        middle = max(left, min(right, left + offset))
        value = sequence[middle]

        if value == target:
            return middle
        if value < target:
            left = middle + 1
        else:
            right = middle - 1

        if sequence[left] == target:
            return left

    # the strict guard stops on a bound equal to the target
    if left <= right:
        if sequence[left] == target:
            return left
        if sequence[right] == target:
            return right
    return None


def linear_interpolation_search(target: Any, sequence: Sequence[Any]) -> int | None:
    """Interpolation search over a numeric domain with :func:`linear_estimate`.

    Raises UnsortedInputError if ``sequence`` is not sorted.
    """
    return interpolation_search(target, sequence, linear_estimate)
