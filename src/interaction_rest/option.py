"""
Tri-state optional values for PATCH-style payload fields.

A nullable field is in exactly one of three states:

- ``UNSET``       the field is omitted from the JSON body
- ``NULL``        the field is sent as JSON ``null`` (cleared)
- ``Some(value)`` the field is sent with ``value``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


class _Null:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()
NULL = _Null()


@dataclass(frozen=True)
class Some(Generic[T]):
    value: T


Nullable = Union[_Unset, _Null, Some[T]]


def coerce(value: Any) -> Nullable[Any]:
    """Wrap a plain value: ``None`` becomes ``NULL``, anything else ``Some``."""
    if value is UNSET or value is NULL or isinstance(value, Some):
        return value
    if value is None:
        return NULL
    return Some(value)


def is_set(opt: Nullable[Any]) -> bool:
    return isinstance(opt, Some)


def is_null(opt: Nullable[Any]) -> bool:
    return opt is NULL


def get(opt: Nullable[T], default: Any = None) -> Any:
    return opt.value if isinstance(opt, Some) else default
