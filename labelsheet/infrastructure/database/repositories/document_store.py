"""SQLAlchemy implementation of the document store."""

from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from labelsheet.db.models import Document, generate_uuid
from labelsheet.modules.store import DocumentNotFoundError, DocumentStoreError, StoredDocument

logger = logging.getLogger(__name__)


class SqlDocumentStore:
    """Stores JSON documents in one table, keyed by collection path.

    Every call runs in its own session and transaction, so a returned call is
    an acknowledged write.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        document = Document(id=generate_uuid(), collection=collection, data=_dumps(data))
        try:
            async with self.session_factory() as session, session.begin():
                session.add(document)
                await session.flush()
                document_id = document.id
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"failed to add document to {collection}") from exc
        return document_id

    async def get_all(self, collection: str) -> Sequence[StoredDocument]:
        # No ORDER BY: callers must not rely on insertion order.
        stmt = select(Document.id, Document.data).where(Document.collection == collection)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.all()
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"failed to read collection {collection}") from exc
        return [StoredDocument(id=row.id, data=_loads(row.id, row.data)) for row in rows]

    async def update(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        stmt = (
            update(Document)
            .where(Document.collection == collection)
            .where(Document.id == document_id)
            .values(data=_dumps(data))
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.session_factory() as session, session.begin():
                result = await session.execute(stmt)
                matched = result.rowcount
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"failed to update document {document_id}") from exc
        if not matched:
            raise DocumentNotFoundError(f"{collection}/{document_id}")

    async def delete(self, collection: str, document_id: str) -> None:
        stmt = (
            delete(Document)
            .where(Document.collection == collection)
            .where(Document.id == document_id)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.session_factory() as session, session.begin():
                await session.execute(stmt)
        except SQLAlchemyError as exc:
            raise DocumentStoreError(f"failed to delete document {document_id}") from exc


def _dumps(data: dict[str, Any]) -> str:
    return json.dumps(data, ensure_ascii=False, sort_keys=True)


def _loads(document_id: str, raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Document %s holds invalid JSON", document_id)
        return {}
    return data if isinstance(data, dict) else {}
