"""SQLAlchemy-backed repository implementations."""

from .document_store import SqlDocumentStore

__all__ = [
    "SqlDocumentStore",
]
