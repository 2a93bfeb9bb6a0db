from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Any, Optional

import pytest
import pytest_asyncio

from labelsheet.core.config import DatabaseSettings, IdentitySettings, Settings
from labelsheet.infrastructure.database import build_engine, build_session_factory, init_db
from labelsheet.infrastructure.database.repositories import SqlDocumentStore
from labelsheet.modules.notifications import Notifier
from labelsheet.modules.store import DocumentStoreError
from labelsheet.modules.templates import FormFields, TemplateForm, TemplateRepository

APP_ID = "test-app"
OWNER_ID = "user-1"


def fixed_clock() -> datetime:
    return datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FlakyStore:
    """Wraps a real store, records calls and fails the operations named in ``fail_on``."""

    def __init__(self, inner: SqlDocumentStore) -> None:
        self.inner = inner
        self.fail_on: set[str] = set()
        self.calls: list[str] = []
        self.gate: Optional[asyncio.Event] = None

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        await self._enter("add")
        return await self.inner.add(collection, data)

    async def get_all(self, collection: str):
        await self._enter("get_all")
        return await self.inner.get_all(collection)

    async def update(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        await self._enter("update")
        await self.inner.update(collection, document_id, data)

    async def delete(self, collection: str, document_id: str) -> None:
        await self._enter("delete")
        await self.inner.delete(collection, document_id)

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if self.gate is not None and operation != "get_all":
            await self.gate.wait()
        if operation in self.fail_on:
            raise DocumentStoreError(f"{operation} unavailable")


def sheet_fields(**overrides: str) -> FormFields:
    fields = FormFields(name="Sheet1")
    for key, value in overrides.items():
        setattr(fields, key, value)
    return fields


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_id=APP_ID,
        database=DatabaseSettings(url="sqlite+aiosqlite:///:memory:"),
        identity=IdentitySettings(secret_key="test-secret-key"),
    )


@pytest_asyncio.fixture
async def store(settings: Settings):
    engine = build_engine(settings.database)
    await init_db(engine)
    yield SqlDocumentStore(build_session_factory(engine))
    await engine.dispose()


@pytest.fixture
def flaky_store(store: SqlDocumentStore) -> FlakyStore:
    return FlakyStore(store)


@pytest.fixture
def repository(flaky_store: FlakyStore) -> TemplateRepository:
    repository = TemplateRepository(flaky_store, APP_ID, clock=fixed_clock)
    repository.bind_owner(OWNER_ID)
    return repository


@pytest.fixture
def notifier() -> Notifier:
    return Notifier(3.0, clock=FakeClock())


@pytest.fixture
def form(repository: TemplateRepository, notifier: Notifier) -> TemplateForm:
    return TemplateForm(repository, notifier)
