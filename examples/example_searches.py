"""Hand-written searches checked with binary_search.check_search.

Bug: `last_element_blind_search()` never probes the last element.
Bug: `trusting_search()` does not check that its input is sorted.
"""

from __future__ import annotations

import math

from binary_search import check_search, ensures, sorted_input


def _holds_target(target: int, sequence: list[int], result: int | None) -> bool:
    return result is None or sequence[result] == target


# ---------------------------------------------------------------------------
# jump search
# ---------------------------------------------------------------------------

@sorted_input("Jump search")
@ensures(_holds_target)
def jump_search(target: int, sequence: list[int]) -> int | None:
    """Skip ahead in blocks of sqrt(n), then scan the block.

    This implementation is correct.
    """
    n = len(sequence)
    if n == 0:
        return None

    step = max(1, math.isqrt(n))
    start = 0
    while start + step < n and sequence[start + step - 1] < target:
        start += step

    for i in range(start, min(start + step, n)):
        if sequence[i] == target:
            return i
    return None


# ---------------------------------------------------------------------------
# ternary search
# ---------------------------------------------------------------------------

@sorted_input("Ternary search")
@ensures(_holds_target)
def ternary_search(target: int, sequence: list[int]) -> int | None:
    """Split the range in three per step.

    This implementation is correct.
    """
    left, right = 0, len(sequence) - 1
    while left <= right:
        third = (right - left) // 3
        m1, m2 = left + third, right - third
        if sequence[m1] == target:
            return m1
        if sequence[m2] == target:
            return m2
        if target < sequence[m1]:
            right = m1 - 1
        elif target > sequence[m2]:
            left = m2 + 1
        else:
            left, right = m1 + 1, m2 - 1
    return None


# ---------------------------------------------------------------------------
# buggy searches
# ---------------------------------------------------------------------------

@sorted_input("Last-element-blind search")
@ensures(_holds_target)
def last_element_blind_search(target: int, sequence: list[int]) -> int | None:
    """Binary search with an off-by-one upper bound.

    Bug: starts from len(sequence) - 2, so the last element is never probed.
    """
    left, right = 0, len(sequence) - 2
    while left <= right:
        middle = (left + right) // 2
        if sequence[middle] == target:
            return middle
        if sequence[middle] < target:
            left = middle + 1
        else:
            right = middle - 1
    return None


@ensures(_holds_target)
def trusting_search(target: int, sequence: list[int]) -> int | None:
    """Linear scan that finds the target but accepts unsorted input.

    Bug: no sortedness check.
    """
    for i, value in enumerate(sequence):
        if value == target:
            return i
    return None


if __name__ == "__main__":
    for fn in (jump_search, ternary_search, last_element_blind_search, trusting_search):
        for r in check_search(fn, max_examples=100):
            print(f"{r.status.upper():>5}  {r.obligation:<20}  {r.function}")
