"""Owner-scoped template repository kept in sync with the document store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from labelsheet.modules.store import (
    DocumentNotFoundError,
    DocumentStore,
    DocumentStoreError,
    owner_collection_path,
)

from .exceptions import TemplateNotFoundError, TemplatePersistenceError, TemplateSyncError
from .models import Template, TemplatePayload, payload_to_document, template_from_document

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TemplateRepository:
    """Client-side facade over the owner's template collection.

    The in-memory ``templates`` tuple is only ever replaced by a full re-fetch;
    every acknowledged create, update or delete is followed by ``refresh()``.
    A failed operation leaves the last fetched tuple in place.
    """

    def __init__(self, store: DocumentStore, app_id: str, *, clock: Clock = utcnow) -> None:
        self._store = store
        self._app_id = app_id
        self._clock = clock
        self._owner_id: Optional[str] = None
        self._templates: tuple[Template, ...] = ()
        self._loaded = False

    @property
    def owner_id(self) -> Optional[str]:
        return self._owner_id

    @property
    def templates(self) -> tuple[Template, ...]:
        return self._templates

    @property
    def loaded(self) -> bool:
        return self._loaded

    def bind_owner(self, owner_id: Optional[str]) -> None:
        if owner_id == self._owner_id:
            return
        self._owner_id = owner_id
        self._templates = ()
        self._loaded = False

    def collection_path(self, owner_id: str) -> str:
        return owner_collection_path(self._app_id, owner_id)

    async def list_templates(self, owner_id: str) -> tuple[Template, ...]:
        try:
            documents = await self._store.get_all(self.collection_path(owner_id))
        except DocumentStoreError as exc:
            logger.error("Failed to list templates for %s: %s", owner_id, exc)
            raise TemplatePersistenceError("templates could not be loaded") from exc

        templates = []
        for document in documents:
            try:
                templates.append(template_from_document(document.id, document.data))
            except (KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping malformed template document %s: %s", document.id, exc)
        return tuple(templates)

    async def refresh(self) -> tuple[Template, ...]:
        owner_id = self._require_owner()
        templates = await self.list_templates(owner_id)
        # The owner may have changed while the fetch was in flight.
        if owner_id == self._owner_id:
            self._templates = templates
            self._loaded = True
        return templates

    async def create(self, payload: TemplatePayload) -> str:
        owner_id = self._require_owner()
        document = payload_to_document(
            payload, owner_id=owner_id, created_at=format_timestamp(self._clock())
        )
        try:
            template_id = await self._store.add(self.collection_path(owner_id), document)
        except DocumentStoreError as exc:
            logger.error("Failed to create template %r: %s", payload.name, exc)
            raise TemplatePersistenceError("template could not be created") from exc
        logger.info("Created template %s for %s", template_id, owner_id)
        await self._resync(template_id)
        return template_id

    async def update(self, template_id: str, payload: TemplatePayload) -> None:
        owner_id = self._require_owner()
        document = payload_to_document(
            payload, owner_id=owner_id, created_at=format_timestamp(self._clock())
        )
        try:
            await self._store.update(self.collection_path(owner_id), template_id, document)
        except DocumentNotFoundError as exc:
            logger.error("Template %s does not exist for %s", template_id, owner_id)
            raise TemplateNotFoundError(template_id) from exc
        except DocumentStoreError as exc:
            logger.error("Failed to update template %s: %s", template_id, exc)
            raise TemplatePersistenceError("template could not be updated") from exc
        logger.info("Updated template %s for %s", template_id, owner_id)
        await self._resync(template_id)

    async def delete(self, template_id: str) -> None:
        owner_id = self._require_owner()
        try:
            await self._store.delete(self.collection_path(owner_id), template_id)
        except DocumentStoreError as exc:
            logger.error("Failed to delete template %s: %s", template_id, exc)
            raise TemplatePersistenceError("template could not be deleted") from exc
        logger.info("Deleted template %s for %s", template_id, owner_id)
        await self._resync(template_id)

    def get(self, template_id: str) -> Optional[Template]:
        for template in self._templates:
            if template.id == template_id:
                return template
        return None

    async def _resync(self, template_id: str) -> None:
        try:
            await self.refresh()
        except TemplatePersistenceError as exc:
            raise TemplateSyncError(
                "write acknowledged but templates could not be reloaded", template_id=template_id
            ) from exc

    def _require_owner(self) -> str:
        if self._owner_id is None:
            raise TemplatePersistenceError("no signed-in user")
        return self._owner_id
