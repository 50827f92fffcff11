"""Leftmost and rightmost rank queries over runs of equal elements."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from binary_search._contracts import ensures, sorted_input


def _is_leftmost(target: Any, sequence: Sequence[Any], result: int) -> bool:
    if not sequence:
        return result == 0
    below = result == 0 or sequence[result - 1] < target
    above = result == len(sequence) or sequence[result] >= target
    return below and above


def _is_rightmost(target: Any, sequence: Sequence[Any], result: int) -> bool:
    if not sequence:
        return result == 0
    at_or_below = result == -1 or sequence[result] <= target
    above = result == len(sequence) - 1 or sequence[result + 1] > target
    return at_or_below and above


@sorted_input("Leftmost rank")
@ensures(_is_leftmost)
def leftmost_rank(target: Any, sequence: Sequence[Any]) -> int:
    """Number of elements strictly less than ``target``.

    This is the first index where ``target`` could be inserted while keeping
    ``sequence`` sorted.

    >>> leftmost_rank(4, [1, 2, 4, 4, 4, 5, 6, 7])
    2
    """
    if not sequence:
        return 0

    left, right = 0, len(sequence)
    while left < right:
        middle = (left + right) // 2
        if sequence[middle] < target:
            left = middle + 1
        else:
            right = middle
    return left


@sorted_input("Rightmost rank")
@ensures(_is_rightmost)
def rightmost_rank(target: Any, sequence: Sequence[Any]) -> int:
    """Number of elements less than or equal to ``target``, minus one.

    When ``target`` occurs this is the index of its last occurrence. A target
    below every element yields -1; an empty sequence yields 0.

    >>> rightmost_rank(4, [1, 2, 4, 4, 4, 5, 6, 7])
    4
    """
    if not sequence:
        return 0

    left, right = 0, len(sequence)
    while left < right:
        middle = (left + right) // 2
        if sequence[middle] > target:
            right = middle
        else:
            left = middle + 1
    return right - 1
