"""Pydantic schemas used across the project."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from labelsheet.modules.templates import FormFields, PageSize, Template


class TokenRequest(BaseModel):
    token: str = Field(..., min_length=1)


class IdentityResponse(BaseModel):
    user_id: str
    token: str
    token_type: str = "bearer"


class TemplateFormRequest(BaseModel):
    """Raw form input; every value is validated as text, numbers are accepted too."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = None
    page_size_type: Optional[str] = "A4"
    custom_width: Optional[str] = None
    custom_height: Optional[str] = None
    margin_top: Optional[str] = "10"
    margin_right: Optional[str] = "10"
    margin_bottom: Optional[str] = "10"
    margin_left: Optional[str] = "10"
    label_width: Optional[str] = "50"
    label_height: Optional[str] = "30"
    gap_horizontal: Optional[str] = "5"
    gap_vertical: Optional[str] = "5"

    def to_fields(self) -> FormFields:
        # An explicit null is treated like an empty form field.
        data = {key: "" if value is None else value for key, value in self.model_dump().items()}
        return FormFields(**data)


class PageSizeResponse(BaseModel):
    type: str
    width: float
    height: float

    @classmethod
    def from_domain(cls, page_size: PageSize) -> "PageSizeResponse":
        return cls(type=page_size.type.value, width=page_size.width, height=page_size.height)


class MarginsResponse(BaseModel):
    top: float
    right: float
    bottom: float
    left: float


class LabelDimensionsResponse(BaseModel):
    width: float
    height: float


class TemplateResponse(BaseModel):
    id: str
    owner_id: str
    created_at: str
    name: str
    page_size: PageSizeResponse
    margins: MarginsResponse
    label_dimensions: LabelDimensionsResponse
    gap_horizontal: float
    gap_vertical: float

    @classmethod
    def from_domain(cls, template: Template) -> "TemplateResponse":
        return cls(
            id=template.id,
            owner_id=template.owner_id,
            created_at=template.created_at,
            name=template.name,
            page_size=PageSizeResponse.from_domain(template.page_size),
            margins=MarginsResponse(
                top=template.margins.top,
                right=template.margins.right,
                bottom=template.margins.bottom,
                left=template.margins.left,
            ),
            label_dimensions=LabelDimensionsResponse(
                width=template.label_dimensions.width,
                height=template.label_dimensions.height,
            ),
            gap_horizontal=template.gap_horizontal,
            gap_vertical=template.gap_vertical,
        )


class TemplateListResponse(BaseModel):
    total: int
    templates: list[TemplateResponse]


class TemplateCreatedResponse(TemplateListResponse):
    id: str


class ValidationErrorResponse(BaseModel):
    message: str
    fields: list[str] = Field(default_factory=list)
