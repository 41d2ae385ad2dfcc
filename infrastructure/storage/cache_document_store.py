"""Document store that keeps JSON-encoded documents in a key/value container."""
from __future__ import annotations

import json
import logging
import uuid

from domain.entities import JSONObject
from domain.errors import (
    DocumentNotFoundError,
    InvalidDocumentError,
    SerializationError,
    StorageCorruptionError,
)
from domain.interfaces import DocumentStore, KeyValueContainer

logger = logging.getLogger(__name__)


class CacheDocumentStore(DocumentStore):
    """Append-only store of serialized documents keyed by a random UUID."""

    def __init__(self, container: KeyValueContainer) -> None:
        self._container = container

    def add(self, document: JSONObject) -> str:
        if not isinstance(document, dict):
            raise InvalidDocumentError("document root must be an object")
        try:
            payload = json.dumps(document, ensure_ascii=False, allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            logger.error("Failed to serialize document: %s", exc)
            raise SerializationError(f"failed to serialize document: {exc}") from exc

        document_id = str(uuid.uuid4())
        self._container.set(document_id, payload)
        return document_id

    def get(self, document_id: str) -> JSONObject:
        payload = self._container.get(document_id)
        if payload is None:
            logger.debug("Document %s not found", document_id)
            raise DocumentNotFoundError(document_id)
        return self._decode(document_id, payload)

    def get_all(self) -> dict[str, JSONObject]:
        return {document_id: self._decode(document_id, payload) for document_id, payload in self._container.items()}

    @staticmethod
    def _decode(document_id: str, payload: object) -> JSONObject:
        if not isinstance(payload, bytes):
            logger.error("Unexpected data stored for document %s: %s", document_id, type(payload).__name__)
            raise StorageCorruptionError(f"unexpected data stored for document {document_id}")
        try:
            document = json.loads(payload)
        except ValueError as exc:
            logger.error("Failed to decode document %s: %s", document_id, exc)
            raise StorageCorruptionError(f"failed to decode document {document_id}") from exc
        if not isinstance(document, dict):
            logger.error("Stored document %s is not an object", document_id)
            raise StorageCorruptionError(f"stored document {document_id} is not an object")
        return document


__all__ = ["CacheDocumentStore"]
