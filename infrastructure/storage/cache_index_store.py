"""Secondary index kept in a key/value container."""
from __future__ import annotations

import logging
from typing import Iterable

from domain.errors import StorageCorruptionError
from domain.interfaces import IndexStore, KeyValueContainer

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


class CacheIndexStore(IndexStore):
    """Stores a frozen set of document ids per index key."""

    def __init__(self, container: KeyValueContainer) -> None:
        self._container = container

    def record_keys(self, document_id: str, keys: Iterable[str]) -> None:
        for key in keys:
            self._container.update(key, lambda ids, key=key: self._union(key, ids, document_id), _EMPTY)

    def lookup(self, key: str) -> frozenset[str]:
        ids = self._container.get(key)
        if ids is None:
            return _EMPTY
        if not isinstance(ids, frozenset):
            logger.error("Unexpected data in index entry %r: %s", key, type(ids).__name__)
            raise StorageCorruptionError(f"unexpected data in index entry {key!r}")
        return ids

    @staticmethod
    def _union(key: str, ids: object, document_id: str) -> frozenset[str]:
        if not isinstance(ids, frozenset):
            logger.error("Unexpected data in index entry %r: %s", key, type(ids).__name__)
            raise StorageCorruptionError(f"unexpected data in index entry {key!r}")
        if document_id in ids:
            return ids
        return ids | {document_id}


__all__ = ["CacheIndexStore"]
