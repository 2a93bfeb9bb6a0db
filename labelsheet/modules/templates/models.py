"""Domain models for label sheet templates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class PageSizeType(str, Enum):
    A4 = "A4"
    A5 = "A5"
    LETTER = "Letter"
    CUSTOM = "Custom"


# Width and height in millimetres.
STANDARD_PAGE_SIZES: dict[PageSizeType, tuple[float, float]] = {
    PageSizeType.A4: (210.0, 297.0),
    PageSizeType.A5: (148.0, 210.0),
    PageSizeType.LETTER: (215.9, 279.4),
}


@dataclass(frozen=True, slots=True)
class StandardPageSize:
    type: PageSizeType

    def __post_init__(self) -> None:
        if self.type not in STANDARD_PAGE_SIZES:
            raise ValueError(f"{self.type!r} is not a standard page size")

    @property
    def width(self) -> float:
        return STANDARD_PAGE_SIZES[self.type][0]

    @property
    def height(self) -> float:
        return STANDARD_PAGE_SIZES[self.type][1]


@dataclass(frozen=True, slots=True)
class CustomPageSize:
    width: float
    height: float

    @property
    def type(self) -> PageSizeType:
        return PageSizeType.CUSTOM


PageSize = Union[StandardPageSize, CustomPageSize]


@dataclass(frozen=True, slots=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float


@dataclass(frozen=True, slots=True)
class LabelDimensions:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class TemplatePayload:
    """Validated, user editable part of a template."""

    name: str
    page_size: PageSize
    margins: Margins
    label_dimensions: LabelDimensions
    gap_horizontal: float
    gap_vertical: float


@dataclass(frozen=True, slots=True)
class Template:
    id: str
    owner_id: str
    created_at: str
    name: str
    page_size: PageSize
    margins: Margins
    label_dimensions: LabelDimensions
    gap_horizontal: float
    gap_vertical: float

    def to_payload(self) -> TemplatePayload:
        return TemplatePayload(
            name=self.name,
            page_size=self.page_size,
            margins=self.margins,
            label_dimensions=self.label_dimensions,
            gap_horizontal=self.gap_horizontal,
            gap_vertical=self.gap_vertical,
        )


def page_size_to_document(page_size: PageSize) -> dict[str, Any]:
    return {"type": page_size.type.value, "width": page_size.width, "height": page_size.height}


def page_size_from_document(data: dict[str, Any]) -> PageSize:
    page_type = PageSizeType(data["type"])
    if page_type is PageSizeType.CUSTOM:
        return CustomPageSize(width=float(data["width"]), height=float(data["height"]))
    return StandardPageSize(page_type)


def payload_to_document(payload: TemplatePayload, *, owner_id: str, created_at: str) -> dict[str, Any]:
    return {
        "name": payload.name,
        "pageSize": page_size_to_document(payload.page_size),
        "margins": {
            "top": payload.margins.top,
            "right": payload.margins.right,
            "bottom": payload.margins.bottom,
            "left": payload.margins.left,
        },
        "labelDimensions": {
            "width": payload.label_dimensions.width,
            "height": payload.label_dimensions.height,
        },
        "gapHorizontal": payload.gap_horizontal,
        "gapVertical": payload.gap_vertical,
        "userId": owner_id,
        "createdAt": created_at,
    }


def template_from_document(document_id: str, data: dict[str, Any]) -> Template:
    """Build a Template from a stored document.

    Raises ``KeyError``, ``TypeError`` or ``ValueError`` when the document does
    not have the expected shape.
    """
    margins = data["margins"]
    label = data["labelDimensions"]
    return Template(
        id=document_id,
        owner_id=str(data["userId"]),
        created_at=str(data.get("createdAt", "")),
        name=str(data["name"]),
        page_size=page_size_from_document(data["pageSize"]),
        margins=Margins(
            top=float(margins["top"]),
            right=float(margins["right"]),
            bottom=float(margins["bottom"]),
            left=float(margins["left"]),
        ),
        label_dimensions=LabelDimensions(width=float(label["width"]), height=float(label["height"])),
        gap_horizontal=float(data["gapHorizontal"]),
        gap_vertical=float(data["gapVertical"]),
    )


def format_number(value: float) -> str:
    """Render a stored millimetre value the way a user would type it."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(slots=True)
class FormFields:
    """Raw string values of the template form."""

    name: str = ""
    page_size_type: str = PageSizeType.A4.value
    custom_width: str = ""
    custom_height: str = ""
    margin_top: str = "10"
    margin_right: str = "10"
    margin_bottom: str = "10"
    margin_left: str = "10"
    label_width: str = "50"
    label_height: str = "30"
    gap_horizontal: str = "5"
    gap_vertical: str = "5"

    @classmethod
    def from_template(cls, template: Template) -> "FormFields":
        custom = isinstance(template.page_size, CustomPageSize)
        return cls(
            name=template.name,
            page_size_type=template.page_size.type.value,
            custom_width=format_number(template.page_size.width) if custom else "",
            custom_height=format_number(template.page_size.height) if custom else "",
            margin_top=format_number(template.margins.top),
            margin_right=format_number(template.margins.right),
            margin_bottom=format_number(template.margins.bottom),
            margin_left=format_number(template.margins.left),
            label_width=format_number(template.label_dimensions.width),
            label_height=format_number(template.label_dimensions.height),
            gap_horizontal=format_number(template.gap_horizontal),
            gap_vertical=format_number(template.gap_vertical),
        )
