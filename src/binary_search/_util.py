from __future__ import annotations

import dataclasses
from collections.abc import Callable, Sequence
from typing import Any

ContractPredicate = Callable[..., bool]


def is_sorted(sequence: Sequence[Any]) -> bool:
    """Return True if every adjacent pair of ``sequence`` is non-descending."""
    return all(sequence[i] <= sequence[i + 1] for i in range(len(sequence) - 1))


def _qualified_name(fn: Callable[..., Any]) -> str:
    return f"{fn.__module__}.{getattr(fn, '__qualname__', getattr(fn, '__name__', str(fn)))}"


def _jsonable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {"__dataclass__": obj.__class__.__name__, **_jsonable(dataclasses.asdict(obj))}
    return repr(obj)


def _safe_call(pred: ContractPredicate, *args: Any, **kwargs: Any) -> tuple[bool, str | None]:
    try:
        return bool(pred(*args, **kwargs)), None
    except Exception as e:
        return False, f"{type(e).__name__}: {e}"
