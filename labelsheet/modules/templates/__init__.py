"""Public exports for label sheet template workflows."""

from .exceptions import (
    InvalidDimensionError,
    TemplateError,
    TemplateNotFoundError,
    TemplatePersistenceError,
    TemplateSyncError,
    TemplateValidationError,
)
from .form import FormMode, TemplateForm
from .geometry import resolve_page_size
from .models import (
    STANDARD_PAGE_SIZES,
    CustomPageSize,
    FormFields,
    LabelDimensions,
    Margins,
    PageSize,
    PageSizeType,
    StandardPageSize,
    Template,
    TemplatePayload,
)
from .repository import TemplateRepository
from .validation import validate_template
from .workspace import TemplateWorkspace

__all__ = [
    "STANDARD_PAGE_SIZES",
    "CustomPageSize",
    "FormFields",
    "FormMode",
    "InvalidDimensionError",
    "LabelDimensions",
    "Margins",
    "PageSize",
    "PageSizeType",
    "StandardPageSize",
    "Template",
    "TemplateError",
    "TemplateForm",
    "TemplateNotFoundError",
    "TemplatePayload",
    "TemplatePersistenceError",
    "TemplateRepository",
    "TemplateSyncError",
    "TemplateValidationError",
    "TemplateWorkspace",
    "resolve_page_size",
    "validate_template",
]
