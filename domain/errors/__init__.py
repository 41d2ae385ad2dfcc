"""Exceptions raised by the DocDB core."""
from __future__ import annotations


class DocDBError(Exception):
    """Base class for every error raised by the document store."""


class InvalidQueryError(DocDBError, ValueError):
    """The query string is syntactically malformed."""

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position


class InvalidDocumentError(DocDBError, ValueError):
    """The submitted value cannot be stored as a document."""


class DocumentNotFoundError(DocDBError, KeyError):
    """No document is stored under the requested id."""

    def __init__(self, document_id: str) -> None:
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"document not found: {self.document_id}"


class InternalError(DocDBError):
    """Fatal failure of the operation in progress."""


class SerializationError(InternalError):
    """A document could not be converted to its stored form."""


class StorageCorruptionError(InternalError):
    """A storage slot holds data of an unexpected shape."""


__all__ = [
    "DocDBError",
    "InvalidQueryError",
    "InvalidDocumentError",
    "DocumentNotFoundError",
    "InternalError",
    "SerializationError",
    "StorageCorruptionError",
]
