"""Computes the index keys a document contributes to the secondary index."""
from __future__ import annotations

from dataclasses import dataclass, field

from domain.entities import JSONObject, ValueKind
from domain.values import format_value, kind_of

PATH_SEPARATOR = "."
VALUE_SEPARATOR = "="


def existence_key(path: str) -> str:
    return path


def equality_key(path: str, formatted_value: str) -> str:
    return f"{path}{VALUE_SEPARATOR}{formatted_value}"


@dataclass(slots=True)
class IndexKeys:
    """Existence keys (``a.b``) and equality keys (``a.b=1``) of one document."""

    paths: set[str] = field(default_factory=set)
    path_values: set[str] = field(default_factory=set)

    def all(self) -> set[str]:
        return self.paths | self.path_values


def flatten(document: JSONObject) -> IndexKeys:
    """Walk ``document`` depth-first and collect the keys of its scalar leaves.

    Arrays are opaque: neither they nor anything below them is indexed.
    """

    keys = IndexKeys()
    _walk(document, "", keys)
    return keys


def _walk(node: JSONObject, prefix: str, keys: IndexKeys) -> None:
    for name, value in node.items():
        path = f"{prefix}{PATH_SEPARATOR}{name}" if prefix else name
        kind = kind_of(value)
        if kind is ValueKind.OBJECT:
            _walk(value, path, keys)  # type: ignore[arg-type]
            continue
        if kind is ValueKind.ARRAY:
            continue
        keys.paths.add(existence_key(path))
        keys.path_values.add(equality_key(path, format_value(value)))


__all__ = ["IndexKeys", "flatten", "existence_key", "equality_key", "PATH_SEPARATOR"]
