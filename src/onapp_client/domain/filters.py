"""Field-equality filters for matching records against partial criteria.

A criteria object is anything that declares a set of field names: a
dataclass instance, a pydantic model instance or a plain mapping. Every
declared field takes part in the comparison, zero values included. A field
that should not constrain the match must not be declared at all, which is
why the criteria types below each carry only the fields they care about.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel

from onapp_client.errors import FieldContractError, NotFoundError

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class AssociatedObjectFilter:
    associated_object_id: int
    associated_object_type: str


@dataclass(frozen=True)
class ParentFilter:
    parent_id: int
    parent_type: str


@dataclass(frozen=True)
class ChainFilter:
    associated_object_id: int
    associated_object_type: str
    parent_id: int
    parent_type: str


@dataclass(frozen=True)
class ActionFilter:
    action: str
    associated_object_id: int
    associated_object_type: str


def criteria_fields(criteria: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` for every field declared on ``criteria``."""
    if isinstance(criteria, Mapping):
        yield from criteria.items()
    elif isinstance(criteria, BaseModel):
        for name in type(criteria).model_fields:
            yield name, getattr(criteria, name)
    elif dataclasses.is_dataclass(criteria) and not isinstance(criteria, type):
        for field in dataclasses.fields(criteria):
            yield field.name, getattr(criteria, field.name)
    else:
        raise TypeError(
            f"Unsupported filter type {type(criteria).__name__}: "
            "expected a dataclass, pydantic model or mapping"
        )


def declares(criteria: Any, name: str) -> bool:
    return any(field_name == name for field_name, _ in criteria_fields(criteria))


def field_value(criteria: Any, name: str, default: Any = None) -> Any:
    for field_name, value in criteria_fields(criteria):
        if field_name == name:
            return value
    return default


def _candidate_value(candidate: Any, name: str) -> Any:
    if isinstance(candidate, BaseModel):
        if name not in type(candidate).model_fields:
            raise FieldContractError(name, type(candidate).__name__)
        return getattr(candidate, name)
    if isinstance(candidate, Mapping):
        if name not in candidate:
            raise FieldContractError(name, type(candidate).__name__)
        return candidate[name]
    value = getattr(candidate, name, _MISSING)
    if value is _MISSING:
        raise FieldContractError(name, type(candidate).__name__)
    return value


def matches(candidate: Any, criteria: Any) -> bool:
    """Return True if every field declared on ``criteria`` equals ``candidate``'s.

    Raises FieldContractError when ``criteria`` declares a field the
    candidate does not have.
    """
    for name, expected in criteria_fields(criteria):
        if not _same_value(_candidate_value(candidate, name), expected):
            return False
    return True


def _same_value(actual: Any, expected: Any) -> bool:
    # bool is an int subclass; a flag never equals a number.
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


def describe(criteria: Any) -> str:
    fields = ", ".join(f"{name}={value!r}" for name, value in criteria_fields(criteria))
    return f"{type(criteria).__name__}({fields})"


def find_one(candidates: Iterable[T], criteria: Any) -> T:
    """Return the first candidate matching ``criteria`` in iteration order."""
    for candidate in candidates:
        if matches(candidate, criteria):
            return candidate
    raise NotFoundError(f"Record not found or wrong filter {describe(criteria)}")
