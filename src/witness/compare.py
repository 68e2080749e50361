"""Structural (deep) equality over plain values, containers and records."""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping, Set
from enum import Enum
from typing import Any

from pydantic import BaseModel

from witness.errors import UncomparableValueError

_SCALARS = (str, bytes, bytearray, int, float, complex, type(None), Enum, type)


def _is_uncomparable(value: Any) -> bool:
    return (
        inspect.isroutine(value)
        or inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
    )


def _is_namedtuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _has_own_eq(value: Any) -> bool:
    return type(value).__eq__ is not object.__eq__


def _record_state(value: Any) -> dict[str, Any] | None:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if _is_namedtuple(value):
        return value._asdict()
    if _has_own_eq(value):
        return None

    state: dict[str, Any] = dict(getattr(value, "__dict__", {}))
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if name not in ("__dict__", "__weakref__") and hasattr(value, name):
                state[name] = getattr(value, name)
    return state


def _native_equals(a: Any, b: Any) -> bool:
    try:
        return bool(a == b)
    except Exception as exc:
        raise UncomparableValueError(
            f"{type(a).__name__}.__eq__ does not give a usable truth value: {exc}"
        ) from exc


def structural_equals(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` have the same shape and contents.

    Values of different types are never equal. Sequences compare element-wise
    in order, mappings by key set and per-key values, and records (dataclasses,
    pydantic models, named tuples, plain objects without ``__eq__``) field by
    field. Functions, generators and coroutines are only equal to themselves;
    comparing two different ones raises UncomparableValueError, as does an
    ``__eq__`` that raises or returns something without a truth value (such
    as an element-wise array).
    """
    return _equals(a, b, set())


def _equals(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if _is_uncomparable(a) or _is_uncomparable(b):
        raise UncomparableValueError(
            f"cannot compare {type(a).__name__} with {type(b).__name__} structurally"
        )
    if type(a) is not type(b):
        return False
    if isinstance(a, _SCALARS):
        return _native_equals(a, b)

    key = (id(a), id(b))
    if key in seen:
        return True
    seen.add(key)

    if isinstance(a, (list, tuple)) and not _is_namedtuple(a):
        return len(a) == len(b) and all(_equals(x, y, seen) for x, y in zip(a, b))

    if isinstance(a, Mapping):
        if a.keys() != b.keys():
            return False
        return all(_equals(a[k], b[k], seen) for k in a)

    if isinstance(a, Set):
        return _native_equals(a, b)

    state_a = _record_state(a)
    if state_a is None:
        return _native_equals(a, b)
    state_b = _record_state(b)
    if state_b is None or state_a.keys() != state_b.keys():
        return False
    return all(_equals(state_a[name], state_b[name], seen) for name in state_a)
