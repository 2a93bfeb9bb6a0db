"""Page size resolution for template forms."""

from __future__ import annotations

import math
from typing import Optional, Union

from .exceptions import InvalidDimensionError
from .models import CustomPageSize, PageSize, PageSizeType, StandardPageSize


def parse_number(raw: object) -> Optional[float]:
    """Parse a form value into a finite float, or ``None`` when it is not one."""
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        # float() also accepts digit grouping such as "1_0".
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_page_size_type(selector: Union[str, PageSizeType]) -> PageSizeType:
    try:
        return PageSizeType(selector)
    except ValueError as exc:
        raise InvalidDimensionError(("page_size_type",)) from exc


def resolve_page_size(
    selector: Union[str, PageSizeType],
    width: object = None,
    height: object = None,
) -> PageSize:
    """Map a page size selector to concrete millimetre dimensions.

    Standard sizes ignore ``width`` and ``height``. ``Custom`` requires both to
    be numbers greater than zero.
    """
    page_type = parse_page_size_type(selector)
    if page_type is not PageSizeType.CUSTOM:
        return StandardPageSize(page_type)

    parsed_width = parse_number(width)
    parsed_height = parse_number(height)
    invalid = []
    if parsed_width is None or parsed_width <= 0:
        invalid.append("custom_width")
    if parsed_height is None or parsed_height <= 0:
        invalid.append("custom_height")
    if invalid:
        raise InvalidDimensionError(invalid)
    return CustomPageSize(width=parsed_width, height=parsed_height)
