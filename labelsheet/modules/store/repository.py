"""Repository protocol for the keyed document store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence


@dataclass(slots=True)
class StoredDocument:
    id: str
    data: dict[str, Any]


class DocumentStore(Protocol):
    async def add(self, collection: str, data: dict[str, Any]) -> str:
        ...

    async def get_all(self, collection: str) -> Sequence[StoredDocument]:
        ...

    async def update(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        ...

    async def delete(self, collection: str, document_id: str) -> None:
        ...


def owner_collection_path(app_id: str, user_id: str, name: str = "templates") -> str:
    """Collection path visible only to ``user_id`` inside application ``app_id``."""
    return f"apps/{app_id}/users/{user_id}/{name}"
