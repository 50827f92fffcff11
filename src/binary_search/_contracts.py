from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

from binary_search._util import ContractPredicate, _qualified_name, _safe_call, is_sorted

_BUNDLE_ATTR = "__binary_search_contracts__"
_ORIGINAL_ATTR = "__binary_search_original__"


class UnsortedInputError(AssertionError):
    """Raised when a search receives a sequence that is not sorted.

    The sortedness of the input is the caller's responsibility, so this
    signals a programming error upstream rather than a condition to branch on.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} encountered a sequence that is not sorted")
        self.operation = operation


def _root_original(fn: Callable[..., Any]) -> Callable[..., Any]:
    cur = fn
    while True:
        if isinstance(cur, functools.partial):
            cur = cur.func
            continue
        nxt = getattr(cur, _ORIGINAL_ATTR, None)
        if nxt is None:
            return cur
        cur = nxt


def _bundle(fn: Callable[..., Any]) -> dict[str, Any]:
    base = _root_original(fn)
    if not hasattr(base, _BUNDLE_ATTR):
        setattr(base, _BUNDLE_ATTR, {"requires": [], "ensures": [], "sorted_input": None})
    return getattr(base, _BUNDLE_ATTR)  # type: ignore[no-any-return]


def _has_bundle(fn: Callable[..., Any]) -> bool:
    return hasattr(_root_original(fn), _BUNDLE_ATTR)


def _set_original(wrapper: Callable[..., Any], original: Callable[..., Any]) -> None:
    setattr(wrapper, _ORIGINAL_ATTR, original)
    root = _root_original(original)
    if hasattr(root, _BUNDLE_ATTR) and not hasattr(wrapper, _BUNDLE_ATTR):
        setattr(wrapper, _BUNDLE_ATTR, getattr(root, _BUNDLE_ATTR))


def _bind(sig: inspect.Signature, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    bound = sig.bind(*args, **kwargs)
    bound.apply_defaults()
    arguments = dict(bound.arguments)
    # predicates see the search arguments, never the instance
    arguments.pop("self", None)
    return arguments


def _accepted(pred: ContractPredicate) -> set[str] | None:
    """Names ``pred`` takes as keywords, or None when it takes any."""
    params = inspect.signature(pred).parameters.values()
    if any(p.kind is p.VAR_KEYWORD for p in params):
        return None
    return {p.name for p in params if p.kind in (p.POSITIONAL_OR_KEYWORD, p.KEYWORD_ONLY)}


def _check_names(pred: ContractPredicate, sig: inspect.Signature, extra: tuple[str, ...] = ()) -> set[str] | None:
    accepted = _accepted(pred)
    if accepted is not None:
        unknown = accepted - set(sig.parameters) - set(extra)
        if unknown:
            raise TypeError(f"Contract predicate names unknown parameters: {sorted(unknown)}")
    return accepted


def _select(arguments: dict[str, Any], accepted: set[str] | None) -> dict[str, Any]:
    if accepted is None:
        return arguments
    return {name: value for name, value in arguments.items() if name in accepted}


def requires(pred: ContractPredicate) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        sig = inspect.signature(fn)
        accepted = _check_names(pred, sig)
        _bundle(fn)["requires"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            ok, err = _safe_call(pred, **_select(_bind(sig, args, kwargs), accepted))
            if not ok:
                raise AssertionError(
                    f"Precondition failed for {_qualified_name(_root_original(fn))}: {err or 'returned False'}"
                )
            return fn(*args, **kwargs)

        _set_original(wrapper, fn)
        return wrapper

    return deco


def ensures(pred: ContractPredicate) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        sig = inspect.signature(fn)
        accepted = _check_names(pred, sig, extra=("result",))
        _bundle(fn)["ensures"].append(pred)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = fn(*args, **kwargs)
            ok, err = _safe_call(pred, **_select({**_bind(sig, args, kwargs), "result": result}, accepted))
            if not ok:
                raise AssertionError(
                    f"Postcondition failed for {_qualified_name(_root_original(fn))}: {err or 'returned False'}"
                )
            return result

        _set_original(wrapper, fn)
        return wrapper

    return deco


def sorted_input(
    operation: str, *, argument: str = "sequence"
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Reject unsorted input before the wrapped search runs.

    ``operation`` names the search in the :class:`UnsortedInputError` message,
    ``argument`` names the parameter holding the sequence. Place it outermost
    so the check precedes every other contract.
    """
    def deco(fn: Callable[..., Any]) -> Callable[..., Any]:
        _bundle(fn)["sorted_input"] = operation
        sig = inspect.signature(fn)

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not is_sorted(_bind(sig, args, kwargs)[argument]):
                raise UnsortedInputError(operation)
            return fn(*args, **kwargs)

        _set_original(wrapper, fn)
        return wrapper

    return deco
