"""Abstract interfaces for the DocDB system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Iterator

from domain.entities import JSONObject


class KeyValueContainer(ABC):
    """Thread-safe key/value container with time based expiry."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the live value stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, resetting its expiry."""

    @abstractmethod
    def update(self, key: str, func: Callable[[Any], Any], default: Any = None) -> Any:
        """Atomically replace the value under ``key`` with ``func(current or default)``."""

    @abstractmethod
    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate over a snapshot of the live entries."""


class DocumentStore(ABC):
    """Holds serialized documents keyed by their generated id."""

    @abstractmethod
    def add(self, document: JSONObject) -> str:
        """Store a document and return its new id."""

    @abstractmethod
    def get(self, document_id: str) -> JSONObject:
        """Return the document stored under ``document_id``."""

    @abstractmethod
    def get_all(self) -> dict[str, JSONObject]:
        """Return every live document keyed by id."""


class IndexStore(ABC):
    """Maps index keys to the ids of the documents that produced them."""

    @abstractmethod
    def record_keys(self, document_id: str, keys: Iterable[str]) -> None:
        """Add ``document_id`` to the id set of every key."""

    @abstractmethod
    def lookup(self, key: str) -> frozenset[str]:
        """Return the ids recorded under ``key`` (empty for unknown keys)."""


__all__ = [
    "KeyValueContainer",
    "DocumentStore",
    "IndexStore",
]
