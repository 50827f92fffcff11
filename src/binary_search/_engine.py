"""Property-based conformance checks for search functions.

:func:`check_search` drives any ``fn(target, sequence)`` search with
Hypothesis and records one :class:`ObligationResult` per obligation:

- ``rejects_unsorted``: unsorted input raises UnsortedInputError
- ``empty_input``: an empty sequence yields the "not found" value
- ``ensures_holds``: postconditions attached with ``@ensures`` hold
- ``equiv_to_reference``: results agree with an obviously-correct reference

Failing obligations are reported, never raised. :func:`check_library` runs
the checks over every search this package exports.
"""

from __future__ import annotations

import dataclasses
import functools
import time
from collections.abc import Callable, Sequence
from typing import Any

from hypothesis import HealthCheck, find, given, settings
from hypothesis import strategies as st
from hypothesis.errors import FailedHealthCheck, NoSuchExample

from binary_search._contracts import UnsortedInputError, _bundle, _has_bundle, _root_original
from binary_search._core import binary_search
from binary_search._exponential import exponential_search
from binary_search._interpolation import interpolation_search, linear_estimate, linear_interpolation_search
from binary_search._ranks import leftmost_rank, rightmost_rank
from binary_search._strategies import _DEFAULT_ELEMENTS, search_inputs, unsorted_lists
from binary_search._uniform import UniformBinarySearch
from binary_search._util import _jsonable, _qualified_name

SearchFn = Callable[..., Any]
Equivalence = Callable[[Any, Any, Any, Sequence[Any]], bool]


@dataclasses.dataclass
class ObligationResult:
    function: str
    obligation: str
    status: str  # "pass" | "fail" | "error" | "skip"
    details: dict[str, Any]
    duration_s: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "function": self.function,
            "obligation": self.obligation,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


def linear_reference(target: Any, sequence: Sequence[Any]) -> int | None:
    for i, value in enumerate(sequence):
        if value == target:
            return i
    return None


def leftmost_reference(target: Any, sequence: Sequence[Any]) -> int:
    return sum(1 for value in sequence if value < target)


def rightmost_reference(target: Any, sequence: Sequence[Any]) -> int:
    if not sequence:
        return 0
    return sum(1 for value in sequence if value <= target) - 1


def same_hit(result: Any, expected: Any, target: Any, sequence: Sequence[Any]) -> bool:
    """Any index holding ``target`` matches a found reference; None matches None."""
    if expected is None:
        return result is None
    return isinstance(result, int) and 0 <= result < len(sequence) and sequence[result] == target


def exact(result: Any, expected: Any, target: Any, sequence: Sequence[Any]) -> bool:
    return bool(result == expected)


def _run_property(
    body: Callable[[dict[str, Any]], None],
    strategy: st.SearchStrategy[dict[str, Any]],
    *,
    max_examples: int,
    deadline_ms: int | None,
    suppress_health_checks: tuple[HealthCheck, ...],
) -> None:
    @settings(
        max_examples=max_examples,
        deadline=deadline_ms,
        suppress_health_check=list(suppress_health_checks),
        derandomize=False,
        database=None,
        report_multiple_bugs=False,
    )
    @given(strategy)
    def prop(kwargs: dict[str, Any]) -> None:
        body(kwargs)

    prop()


def check_search(
    fn: SearchFn,
    *,
    name: str | None = None,
    reference: SearchFn | None = None,
    eq: Equivalence | None = None,
    empty_result: Any = None,
    elements: st.SearchStrategy[Any] | None = None,
    max_examples: int = 200,
    max_list_size: int = 20,
    deadline_ms: int | None = None,
    suppress_health_checks: tuple[HealthCheck, ...] = (
        HealthCheck.too_slow,
        HealthCheck.filter_too_much,
    ),
    on_result: Callable[[ObligationResult], None] | None = None,
) -> list[ObligationResult]:
    """Check ``fn(target, sequence)`` against the search obligations.

    Args:
        name:         Label for the results; defaults to the qualified name.
        reference:    Obviously-correct search to compare against. Defaults
                      to a linear scan returning the first matching index.
        eq:           ``eq(result, expected, target, sequence)``. Defaults to
                      :func:`same_hit`, which accepts any matching index.
        empty_result: Expected result for an empty sequence.
        elements:     Strategy for targets and sequence elements.
    """
    ref = reference or linear_reference
    equiv = eq or same_hit
    elems = elements if elements is not None else _DEFAULT_ELEMENTS
    qn = name or _qualified_name(_root_original(fn))
    property_settings = {
        "max_examples": max_examples,
        "deadline_ms": deadline_ms,
        "suppress_health_checks": suppress_health_checks,
    }

    results: list[ObligationResult] = []

    def _emit(result: ObligationResult) -> None:
        results.append(result)
        if on_result is not None:
            on_result(result)

    # 1) Unsorted input must be rejected
    t0 = time.monotonic()
    rejected_ce: list[dict[str, Any] | None] = [None]

    def rejects(kwargs: dict[str, Any]) -> None:
        try:
            r = fn(**kwargs)
        except UnsortedInputError:
            return
        except Exception as e:
            rejected_ce[0] = {"kwargs": _jsonable(kwargs), "error": f"{type(e).__name__}: {e}"}
            raise AssertionError(f"raised {type(e).__name__} instead of UnsortedInputError") from e
        rejected_ce[0] = {"kwargs": _jsonable(kwargs), "impl_result": _jsonable(r)}
        raise AssertionError("unsorted input accepted")

    unsorted_strat = st.fixed_dictionaries({
        "target": elems,
        "sequence": unsorted_lists(elems, max_size=max_list_size),
    })
    _emit(_outcome(qn, "rejects_unsorted", rejects, unsorted_strat, rejected_ce, t0, property_settings))

    # 2) Empty input is a normal result
    t1 = time.monotonic()
    try:
        target = find(elems, lambda _: True)
        r = fn(target=target, sequence=[])
        status = "pass" if r == empty_result else "fail"
        _emit(ObligationResult(
            qn, "empty_input", status,
            {"target": _jsonable(target), "result": _jsonable(r), "expected": _jsonable(empty_result)},
            duration_s=time.monotonic() - t1,
        ))
    except Exception as e:
        _emit(ObligationResult(
            qn, "empty_input", "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t1,
        ))

    strat_kwargs = search_inputs(elems, max_size=max_list_size)

    # 3) Attached postconditions
    t2 = time.monotonic()
    ensures_count = len(_bundle(fn)["ensures"]) if _has_bundle(fn) else 0
    if ensures_count:
        ensures_ce: list[dict[str, Any] | None] = [None]

        def holds(kwargs: dict[str, Any]) -> None:
            try:
                fn(**kwargs)
            except AssertionError as e:
                ensures_ce[0] = {"kwargs": _jsonable(kwargs), "note": str(e)}
                raise

        _emit(_outcome(qn, "ensures_holds", holds, strat_kwargs, ensures_ce, t2, property_settings,
                       extra={"ensures": ensures_count}))
    else:
        _emit(ObligationResult(qn, "ensures_holds", "skip", {"reason": "no @ensures attached"}))

    # 4) Equivalence with the reference: deterministic probe, then randomized run
    t3 = time.monotonic()

    def fails(kwargs: dict[str, Any]) -> bool:
        try:
            return not equiv(fn(**kwargs), ref(**kwargs), kwargs["target"], kwargs["sequence"])
        except Exception:
            return True

    try:
        found = find(strat_kwargs, fails, settings=settings(
            max_examples=max_examples,
            database=None,
            suppress_health_check=list(suppress_health_checks),
        ))
    except NoSuchExample:
        found = None

    if found is not None:
        _emit(ObligationResult(
            qn, "equiv_to_reference", "fail",
            {
                "reference": _qualified_name(ref),
                "error": "counterexample found by find()",
                "counterexample": _counterexample(fn, ref, found),
            },
            duration_s=time.monotonic() - t3,
        ))
        return results

    equiv_ce: list[dict[str, Any] | None] = [None]

    def agrees(kwargs: dict[str, Any]) -> None:
        impl_r = fn(**kwargs)
        ref_r = ref(**kwargs)
        if not equiv(impl_r, ref_r, kwargs["target"], kwargs["sequence"]):
            equiv_ce[0] = {
                "kwargs": _jsonable(kwargs),
                "impl_result": _jsonable(impl_r),
                "reference_result": _jsonable(ref_r),
            }
            raise AssertionError("impl != reference")

    _emit(_outcome(qn, "equiv_to_reference", agrees, strat_kwargs, equiv_ce, t3, property_settings,
                   extra={"reference": _qualified_name(ref)}))
    return results


def _counterexample(fn: SearchFn, ref: SearchFn, kwargs: dict[str, Any]) -> dict[str, Any]:
    try:
        return {
            "kwargs": _jsonable(kwargs),
            "impl_result": _jsonable(fn(**kwargs)),
            "reference_result": _jsonable(ref(**kwargs)),
        }
    except Exception as e:
        return {"kwargs": _jsonable(kwargs), "error": f"{type(e).__name__}: {e}"}


def _outcome(
    qn: str,
    obligation: str,
    body: Callable[[dict[str, Any]], None],
    strategy: st.SearchStrategy[dict[str, Any]],
    shrunk_ce: list[dict[str, Any] | None],
    started: float,
    property_settings: dict[str, Any],
    *,
    extra: dict[str, Any] | None = None,
) -> ObligationResult:
    details = dict(extra or {})
    try:
        _run_property(body, strategy, **property_settings)
    except FailedHealthCheck as e:
        status = "fail"
        details["error"] = f"FailedHealthCheck: {e}"
    except AssertionError as e:
        status = "fail"
        details.update({"error": str(e), "counterexample": shrunk_ce[0]})
    except Exception as e:
        status = "error"
        details["error"] = f"{type(e).__name__}: {e}"
    else:
        status = "pass"
        details["max_examples"] = property_settings["max_examples"]
    return ObligationResult(qn, obligation, status, details, duration_s=time.monotonic() - started)


def check_library(
    *,
    max_examples: int = 200,
    max_list_size: int = 20,
    deadline_ms: int | None = None,
    on_result: Callable[[ObligationResult], None] | None = None,
) -> list[ObligationResult]:
    """Run :func:`check_search` over every search exported by this package.

    The uniform searcher is checked through a single instance, so its cached
    lookup table is rebuilt and reused across the generated lengths.
    """
    searcher = UniformBinarySearch()
    searches: list[tuple[SearchFn, dict[str, Any]]] = [
        (binary_search, {}),
        (exponential_search, {}),
        (functools.partial(interpolation_search, estimator=linear_estimate), {}),
        (linear_interpolation_search, {}),
        (searcher.search, {}),
        (leftmost_rank, {"reference": leftmost_reference, "eq": exact, "empty_result": 0}),
        (rightmost_rank, {"reference": rightmost_reference, "eq": exact, "empty_result": 0}),
    ]

    results: list[ObligationResult] = []
    for fn, overrides in searches:
        results.extend(check_search(
            fn,
            max_examples=max_examples,
            max_list_size=max_list_size,
            deadline_ms=deadline_ms,
            on_result=on_result,
            **overrides,
        ))
    return results
