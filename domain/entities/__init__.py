"""Domain entities for the DocDB system."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]


class ValueKind(str, Enum):
    """Kinds of values a document tree is made of."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"


class Operator(str, Enum):
    """Comparison applied by a query clause."""

    EQ = "="
    LT = "<"
    GT = ">"


@dataclass(frozen=True, slots=True)
class Clause:
    """One ``path op value`` unit of a query."""

    path: tuple[str, ...]
    operator: Operator
    value: str

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True, slots=True)
class Query:
    """An ordered list of clauses combined with AND."""

    clauses: tuple[Clause, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    @property
    def is_empty(self) -> bool:
        return not self.clauses


@dataclass(slots=True)
class SearchHit:
    """A document returned by a search together with its id."""

    id: str
    document: JSONObject

    def to_dict(self) -> dict[str, object]:
        return {"id": self.id, "document": self.document}


__all__ = [
    "JSONScalar",
    "JSONValue",
    "JSONObject",
    "ValueKind",
    "Operator",
    "Clause",
    "Query",
    "SearchHit",
]
