"""Feature modules and their public exports."""

from . import identity, notifications, store, templates

__all__ = [
    "identity",
    "notifications",
    "store",
    "templates",
]
