"""Wiring of identity, repository, form and notifications for one session."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from labelsheet.core.config import Settings
from labelsheet.modules.identity import IdentityBootstrapError, IdentityProvider, bootstrap_identity
from labelsheet.modules.notifications import Notifier
from labelsheet.modules.store import DocumentStore

from .exceptions import TemplatePersistenceError
from .form import SYNC_FAILED_MESSAGE, TemplateForm
from .models import Template
from .repository import TemplateRepository

logger = logging.getLogger(__name__)


class TemplateWorkspace:
    """A long-lived template editing session.

    The repository follows the identity provider: every emitted user id becomes
    the repository owner, the form is reset and the new owner's templates are
    reloaded. Sign-out clears the list and resets the form.
    """

    def __init__(
        self,
        identity: IdentityProvider,
        repository: TemplateRepository,
        notifier: Notifier,
        *,
        initial_token: Optional[str] = None,
    ) -> None:
        self.identity = identity
        self.repository = repository
        self.notifier = notifier
        self.form = TemplateForm(repository, notifier)
        self.initial_token = initial_token
        self.error: Optional[str] = None
        self.ready = False
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._reload: Optional[asyncio.Task[bool]] = None

    @classmethod
    def from_settings(cls, settings: Settings, store: DocumentStore) -> "TemplateWorkspace":
        return cls(
            IdentityProvider(settings.identity),
            TemplateRepository(store, settings.app_id),
            Notifier.from_settings(settings.notifications),
            initial_token=settings.identity.initial_token,
        )

    @property
    def user_id(self) -> Optional[str]:
        return self.identity.current_user_id

    @property
    def templates(self) -> tuple[Template, ...]:
        return self.repository.templates

    @property
    def pending_reload(self) -> Optional["asyncio.Task[bool]"]:
        """Load scheduled by the last identity change, if any."""
        return self._reload

    async def start(self) -> bool:
        if self._unsubscribe is None:
            self._unsubscribe = self.identity.on_identity_change(self._handle_identity)
        self._reload = None
        try:
            await bootstrap_identity(self.identity, self.initial_token)
        except IdentityBootstrapError as exc:
            logger.error("Session bootstrap failed: %s", exc)
            self.error = exc.message
            self.ready = False
            return False
        self.ready = True
        if self._reload is None:
            # Already signed in as the bootstrapped user, no change was emitted.
            return await self.load()
        return await self._reload

    async def load(self) -> bool:
        self.error = None
        try:
            await self.repository.refresh()
        except TemplatePersistenceError as exc:
            logger.error("Loading templates failed: %s", exc)
            self.error = SYNC_FAILED_MESSAGE
            return False
        return True

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._reload is not None and not self._reload.done():
            self._reload.cancel()

    def _handle_identity(self, user_id: Optional[str]) -> None:
        self.repository.bind_owner(user_id)
        # An edit target belongs to the previous owner's collection.
        self.form.reset()
        if user_id is None:
            self.ready = False
            return
        self.ready = True
        logger.info("Identity changed to %s, reloading templates", user_id)
        self._reload = asyncio.get_running_loop().create_task(self.load())
