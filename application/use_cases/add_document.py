"""Use case for storing a document and indexing its fields."""
from __future__ import annotations

import logging

from application.services.path_flattener import flatten
from domain.entities import JSONObject
from domain.errors import InvalidDocumentError
from domain.interfaces import DocumentStore, IndexStore

logger = logging.getLogger(__name__)


def add_document(
    document: JSONObject,
    *,
    document_store: DocumentStore,
    index_store: IndexStore,
) -> str:
    """Store ``document`` and record its index keys; return the new id."""

    if not isinstance(document, dict):
        raise InvalidDocumentError("document root must be an object")
    try:
        keys = flatten(document)
    except (TypeError, ValueError, RecursionError) as exc:
        raise InvalidDocumentError(str(exc)) from exc

    document_id = document_store.add(document)
    index_store.record_keys(document_id, keys.all())
    logger.debug("Added document %s with %d index keys", document_id, len(keys.paths) + len(keys.path_values))
    return document_id


__all__ = ["add_document"]
