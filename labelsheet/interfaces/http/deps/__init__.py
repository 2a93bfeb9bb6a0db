"""Reusable FastAPI dependencies."""

from .templates import get_container, get_template_repository

__all__ = [
    "get_container",
    "get_template_repository",
]
