from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

_DEFAULT_ELEMENTS: st.SearchStrategy[int] = st.integers(min_value=-1000, max_value=1000)


def sorted_lists(
    elements: st.SearchStrategy[Any] | None = None,
    *,
    min_size: int = 0,
    max_size: int = 20,
    unique: bool = False,
) -> st.SearchStrategy[list[Any]]:
    elems = elements if elements is not None else _DEFAULT_ELEMENTS
    return st.lists(elems, min_size=min_size, max_size=max_size, unique=unique).map(sorted)


def unsorted_lists(
    elements: st.SearchStrategy[Any] | None = None,
    *,
    max_size: int = 20,
) -> st.SearchStrategy[list[Any]]:
    """Lists holding at least one adjacent pair in descending order."""
    elems = elements if elements is not None else _DEFAULT_ELEMENTS

    def _swap_a_rise(xs: list[Any]) -> st.SearchStrategy[list[Any]]:
        # xs[0] < xs[-1] guarantees at least one strict rise
        rises = [k for k in range(len(xs) - 1) if xs[k] < xs[k + 1]]
        return st.sampled_from(rises).map(lambda k: [*xs[:k], xs[k + 1], xs[k], *xs[k + 2:]])

    return (
        st.lists(elems, min_size=2, max_size=max(2, max_size))
        .map(sorted)
        .filter(lambda xs: xs[0] < xs[-1])
        .flatmap(_swap_a_rise)
    )


def search_inputs(
    elements: st.SearchStrategy[Any] | None = None,
    *,
    max_size: int = 20,
) -> st.SearchStrategy[dict[str, Any]]:
    """``{"target": ..., "sequence": ...}`` keyword dicts for a search function.

    Half of the targets are drawn from the sequence itself so that hits and
    misses are both well represented.
    """
    elems = elements if elements is not None else _DEFAULT_ELEMENTS

    def _with_target(xs: list[Any]) -> st.SearchStrategy[dict[str, Any]]:
        target = st.one_of(elems, st.sampled_from(xs)) if xs else elems
        return st.fixed_dictionaries({"target": target, "sequence": st.just(xs)})

    return sorted_lists(elems, max_size=max_size).flatmap(_with_target)
