"""Template domain specific exceptions."""

from __future__ import annotations

from typing import Iterable

DEFAULT_VALIDATION_MESSAGE = "Please fill in all fields with valid, positive values."
CUSTOM_PAGE_SIZE_MESSAGE = "Please enter a valid width and height for the custom page size."


class TemplateError(Exception):
    """Base class for template domain errors."""


class TemplateValidationError(TemplateError):
    """Raised when raw form input does not describe a well-formed template.

    ``message`` is the single text shown to the user, ``fields`` names every
    input that failed.
    """

    def __init__(self, fields: Iterable[str] = (), message: str = DEFAULT_VALIDATION_MESSAGE) -> None:
        self.fields = tuple(fields)
        self.message = message
        super().__init__(message)


class InvalidDimensionError(TemplateValidationError):
    """Raised when a custom page size is missing, non-numeric or not positive."""

    def __init__(self, fields: Iterable[str] = (), message: str = CUSTOM_PAGE_SIZE_MESSAGE) -> None:
        super().__init__(fields, message)


class TemplatePersistenceError(TemplateError):
    """Raised when the document store rejects or fails an operation."""

    committed = False


class TemplateSyncError(TemplatePersistenceError):
    """Raised when a write was acknowledged but the follow-up re-fetch failed."""

    committed = True

    def __init__(self, message: str, template_id: str | None = None) -> None:
        self.template_id = template_id
        super().__init__(message)


class TemplateNotFoundError(TemplatePersistenceError):
    """Raised when updating a template id absent from the owner's collection."""
