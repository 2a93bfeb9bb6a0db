"""Owner-scoped document store abstractions."""

from .exceptions import DocumentNotFoundError, DocumentStoreError
from .repository import DocumentStore, StoredDocument, owner_collection_path

__all__ = [
    "DocumentNotFoundError",
    "DocumentStore",
    "DocumentStoreError",
    "StoredDocument",
    "owner_collection_path",
]
