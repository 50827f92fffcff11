from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from binary_search._contracts import ensures, sorted_input


def _holds_target(target: Any, sequence: Sequence[Any], result: int | None) -> bool:
    return result is None or (0 <= result < len(sequence) and sequence[result] == target)


def _binary_search(target: Any, sequence: Sequence[Any], left: int, right: int) -> int | None:
    """Search the inclusive range ``[left, right]`` without checking sortedness."""
    while left <= right:
        middle = (left + right) // 2
        value = sequence[middle]
        if value == target:
            return middle
        if value < target:
            left = middle + 1
        else:
            right = middle - 1
    return None


@sorted_input("Binary search")
@ensures(_holds_target)
def binary_search(target: Any, sequence: Sequence[Any]) -> int | None:
    """Return the index of an element equal to ``target``, or None.

    With duplicates, the index is whichever match the midpoint sequence
    lands on first.

    >>> binary_search(5, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    4

    Raises UnsortedInputError if ``sequence`` is not sorted.
    """
    if not sequence:
        return None
    return _binary_search(target, sequence, 0, len(sequence) - 1)
