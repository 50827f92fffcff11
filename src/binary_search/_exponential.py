from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from binary_search._contracts import ensures, sorted_input
from binary_search._core import _binary_search, _holds_target


@sorted_input("Exponential search")
@ensures(_holds_target)
def exponential_search(target: Any, sequence: Sequence[Any]) -> int | None:
    """Find ``target`` by doubling a bound, then binary searching behind it.

    Cheaper than :func:`binary_search` when the target sits near the start.

    >>> exponential_search(5, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    4
    """
    if not sequence:
        return None

    size = len(sequence)
    bound = 1
    while bound < size and sequence[bound] < target:
        bound *= 2

    # half-open [bound // 2, min(bound + 1, size))
    return _binary_search(target, sequence, bound // 2, min(bound + 1, size) - 1)
