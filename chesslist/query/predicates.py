"""
Backend-agnostic predicate expressions.

Filters are built as a small tree of frozen dataclasses and handed to a
record store, which translates them into its own query language. Field
names may address a key inside a JSON column with a dot, e.g. ``format.type``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple, Union


class RangeOp(str, Enum):
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


@dataclass(frozen=True)
class Equals:
    field: str
    value: Any


@dataclass(frozen=True)
class In:
    field: str
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring match. ``text`` is always taken literally."""

    field: str
    text: str


@dataclass(frozen=True)
class Range:
    field: str
    op: RangeOp
    value: Any


@dataclass(frozen=True)
class And:
    clauses: Tuple["Predicate", ...]


@dataclass(frozen=True)
class Or:
    clauses: Tuple["Predicate", ...]


Predicate = Union[Equals, In, Contains, Range, And, Or]


def any_of(*clauses: "Predicate") -> "Predicate":
    """OR the given clauses together, collapsing a single clause to itself."""
    if len(clauses) == 1:
        return clauses[0]
    return Or(tuple(clauses))


def all_of(*clauses: "Predicate") -> "Predicate":
    if len(clauses) == 1:
        return clauses[0]
    return And(tuple(clauses))
