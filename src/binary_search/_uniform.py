"""Uniform binary search.

A :class:`UniformBinarySearch` precomputes a table of index jumps for one
array length and replaces the midpoint arithmetic of a plain binary search
with table lookups. The table is rebuilt only when a search arrives for an
array of a different length, so repeated searches over same-sized arrays pay
for it once.

Table for length ``L``::

    table[i] = (L + 2**i) // 2**(i + 1)     until the first zero entry

The first probe is ``table[0] - 1``, the floor midpoint of the whole range.
Each later comparison moves the probe right (target greater) or left (target
smaller) by the next entry. The non-zero entries sum to ``L``, so the probe
never passes the last index; for even lengths the leftmost path ends one
position before the first element, which compares below every target.

The table has a fixed capacity of :data:`MAX_LOOKUP_TABLE_SIZE` entries,
terminating zero included, which bounds the supported lengths to
``2**(MAX_LOOKUP_TABLE_SIZE - 1) - 1``.

A searcher holds mutable cache state and is meant for a single owner. Share
one across threads only behind external locking, or give each thread its own.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from binary_search._contracts import ensures, sorted_input
from binary_search._core import _holds_target

MAX_LOOKUP_TABLE_SIZE = 64


class LookupTableOverflowError(ValueError):
    """Raised when a length needs more table entries than the fixed capacity."""


class UniformBinarySearch:
    """Binary search driven by a cached per-length lookup table."""

    __slots__ = ("_last_length", "_lookup_table")

    def __init__(self) -> None:
        self._last_length: int | None = None
        self._lookup_table: list[int] = [0] * MAX_LOOKUP_TABLE_SIZE

    def __repr__(self) -> str:
        return f"UniformBinarySearch(last_length={self._last_length!r})"

    @property
    def last_length(self) -> int | None:
        """Length the current table was built for, or None before the first build."""
        return self._last_length

    @property
    def lookup_table(self) -> tuple[int, ...]:
        return tuple(self._lookup_table)

    @sorted_input("Uniform binary search")
    @ensures(_holds_target)
    def search(self, target: Any, sequence: Sequence[Any]) -> int | None:
        """Return the index of an element equal to ``target``, or None.

        Rebuilds the lookup table first when ``len(sequence)`` differs from
        :attr:`last_length`. An empty sequence leaves the table untouched.

        >>> UniformBinarySearch().search(5, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
        4

        Raises UnsortedInputError if ``sequence`` is not sorted and
        LookupTableOverflowError if it is too long for the table.
        """
        if not sequence:
            return None

        if len(sequence) != self._last_length:
            self.update_lookup_table(len(sequence))

        return self._inner_search(target, sequence)

    def _inner_search(self, target: Any, sequence: Sequence[Any]) -> int | None:
        table = self._lookup_table
        index = table[0] - 1
        depth = 0

        while table[depth] != 0:
            # index -1 stands for a sentinel below every element
            if index < 0:
                value_below = True
            else:
                value = sequence[index]
                if value == target:
                    return index
                value_below = value < target

            depth += 1
            if value_below:
                index += table[depth]
            else:
                index -= table[depth]

        return None

    def update_lookup_table(self, length: int) -> None:
        """Rebuild the lookup table for arrays of ``length`` elements."""
        if length < 0:
            raise LookupTableOverflowError(f"Lookup table length must be non-negative, got {length}")
        if length.bit_length() >= MAX_LOOKUP_TABLE_SIZE:
            raise LookupTableOverflowError(
                f"Length {length} needs {length.bit_length() + 1} lookup table entries, "
                f"capacity is {MAX_LOOKUP_TABLE_SIZE}"
            )

        power = 1
        i = 0
        while True:
            half = power
            power <<= 1
            self._lookup_table[i] = (length + half) // power
            if self._lookup_table[i] == 0:
                break
            i += 1

        self._last_length = length
