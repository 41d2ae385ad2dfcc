"""Evaluates parsed query clauses against a materialized document."""
from __future__ import annotations

from typing import Iterable

from domain.entities import Clause, JSONObject, JSONValue, Operator, ValueKind
from domain.values import coerce_number, format_value, kind_of, parse_float

_MISSING = object()
_NOT_COMPARABLE = (ValueKind.OBJECT, ValueKind.ARRAY, ValueKind.NULL)


def resolve(document: JSONObject, path: tuple[str, ...]) -> JSONValue | object:
    """Return the value at ``path`` or ``_MISSING`` if any step does not exist."""

    node: JSONValue = document
    for name in path:
        if not isinstance(node, dict) or name not in node:
            return _MISSING
        node = node[name]
    return node


def match_clause(clause: Clause, document: JSONObject) -> bool:
    value = resolve(document, clause.path)
    if value is _MISSING:
        return False
    kind = kind_of(value)
    if kind in _NOT_COMPARABLE:
        return False

    if clause.operator is Operator.EQ:
        return clause.value == format_value(value)  # type: ignore[arg-type]

    expected = parse_float(clause.value)
    actual = coerce_number(value)  # type: ignore[arg-type]
    if expected is None or actual is None:
        return False
    if clause.operator is Operator.GT:
        return actual > expected
    return actual < expected


def match(clauses: Iterable[Clause], document: JSONObject) -> bool:
    """Return ``True`` when every clause holds for ``document``."""

    return all(match_clause(clause, document) for clause in clauses)


__all__ = ["resolve", "match_clause", "match"]
