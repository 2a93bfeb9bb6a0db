"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from labelsheet.core.config import Settings, get_settings
from labelsheet.infrastructure.database import build_engine, build_session_factory, init_db
from labelsheet.infrastructure.database.repositories import SqlDocumentStore
from labelsheet.modules.templates import TemplateRepository


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    store: SqlDocumentStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings.database, debug=settings.debug)
        session_factory = build_session_factory(engine)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            store=SqlDocumentStore(session_factory),
        )

    async def init_infrastructure(self) -> None:
        """Ensure the document table exists."""
        await init_db(self.engine)

    async def dispose(self) -> None:
        await self.engine.dispose()

    def template_repository(self, owner_id: str) -> TemplateRepository:
        repository = TemplateRepository(self.store, self.settings.app_id)
        repository.bind_owner(owner_id)
        return repository


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer.from_settings(get_settings())


__all__ = ["ApplicationContainer", "get_container"]
