"""Use case for point lookups by document id."""
from __future__ import annotations

from domain.entities import JSONObject
from domain.interfaces import DocumentStore


def get_document(document_id: str, *, document_store: DocumentStore) -> JSONObject:
    """Return the stored document or raise ``DocumentNotFoundError``."""

    return document_store.get(document_id)


__all__ = ["get_document"]
