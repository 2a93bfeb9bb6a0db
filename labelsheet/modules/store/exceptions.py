"""Document store specific exceptions."""


class DocumentStoreError(Exception):
    """Base class for document store failures."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when updating a document that does not exist in the collection."""
