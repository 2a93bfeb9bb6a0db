import pytest

from labelsheet.modules.templates import (
    CustomPageSize,
    InvalidDimensionError,
    PageSizeType,
    StandardPageSize,
    TemplateValidationError,
    resolve_page_size,
)
from labelsheet.modules.templates.geometry import parse_number


@pytest.mark.parametrize(
    "selector, width, height",
    [
        ("A4", 210, 297),
        ("A5", 148, 210),
        ("Letter", 215.9, 279.4),
    ],
)
def test_standard_sizes_ignore_custom_fields(selector, width, height):
    page_size = resolve_page_size(selector, "999", "-5")

    assert page_size == StandardPageSize(PageSizeType(selector))
    assert page_size.width == width
    assert page_size.height == height
    assert page_size.type.value == selector


def test_custom_size_parses_dimensions():
    page_size = resolve_page_size(PageSizeType.CUSTOM, " 200 ", "280.5")

    assert page_size == CustomPageSize(width=200.0, height=280.5)
    assert page_size.type is PageSizeType.CUSTOM


@pytest.mark.parametrize(
    "width, height, invalid",
    [
        ("0", "280", ("custom_width",)),
        ("200", "-1", ("custom_height",)),
        ("abc", "280", ("custom_width",)),
        ("", "", ("custom_width", "custom_height")),
        (None, None, ("custom_width", "custom_height")),
        ("200", "nan", ("custom_height",)),
    ],
)
def test_custom_size_rejects_bad_dimensions(width, height, invalid):
    with pytest.raises(InvalidDimensionError) as excinfo:
        resolve_page_size("Custom", width, height)

    assert excinfo.value.fields == invalid
    assert isinstance(excinfo.value, TemplateValidationError)


def test_unknown_selector_is_rejected():
    with pytest.raises(InvalidDimensionError) as excinfo:
        resolve_page_size("B5")

    assert excinfo.value.fields == ("page_size_type",)


def test_parse_number_accepts_only_finite_numbers():
    assert parse_number(" 12.5 ") == 12.5
    assert parse_number("1e3") == 1000.0
    assert parse_number(7) == 7.0
    assert parse_number("inf") is None
    assert parse_number("10mm") is None
    assert parse_number("1_0") is None
    assert parse_number(True) is None
    assert parse_number(None) is None
