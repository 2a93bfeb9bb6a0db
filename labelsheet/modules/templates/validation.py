"""Validation of raw template form input."""

from __future__ import annotations

from .exceptions import TemplateValidationError
from .geometry import parse_number, resolve_page_size
from .models import FormFields, LabelDimensions, Margins, TemplatePayload

# (field, must be strictly positive)
_NUMERIC_FIELDS = (
    ("margin_top", False),
    ("margin_right", False),
    ("margin_bottom", False),
    ("margin_left", False),
    ("label_width", True),
    ("label_height", True),
    ("gap_horizontal", False),
    ("gap_vertical", False),
)


def validate_template(fields: FormFields) -> TemplatePayload:
    """Turn raw form values into a template payload.

    Raises ``TemplateValidationError`` listing every failing field, or
    ``InvalidDimensionError`` when only the custom page size is wrong.
    """
    invalid: list[str] = []
    name = (fields.name or "").strip()
    if not name:
        invalid.append("name")

    values: dict[str, float] = {}
    for field_name, positive in _NUMERIC_FIELDS:
        value = parse_number(getattr(fields, field_name))
        if value is None or value < 0 or (positive and value == 0):
            invalid.append(field_name)
            continue
        values[field_name] = value

    if invalid:
        raise TemplateValidationError(invalid)

    page_size = resolve_page_size(fields.page_size_type, fields.custom_width, fields.custom_height)

    return TemplatePayload(
        name=name,
        page_size=page_size,
        margins=Margins(
            top=values["margin_top"],
            right=values["margin_right"],
            bottom=values["margin_bottom"],
            left=values["margin_left"],
        ),
        label_dimensions=LabelDimensions(width=values["label_width"], height=values["label_height"]),
        gap_horizontal=values["gap_horizontal"],
        gap_vertical=values["gap_vertical"],
    )
