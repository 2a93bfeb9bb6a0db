"""Session identity: anonymous and custom-token sign-in with change notifications."""

from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from labelsheet.core.config import IdentitySettings

from .exceptions import AnonymousSignInDisabledError
from .tokens import create_custom_token, decode_custom_token

logger = logging.getLogger(__name__)

IdentityHandler = Callable[[Optional[str]], None]


class IdentityProvider:
    """Tracks the signed-in user id of one session.

    Handlers registered with ``on_identity_change`` receive the new user id, or
    ``None`` after sign-out, every time it changes.
    """

    def __init__(self, settings: IdentitySettings) -> None:
        self._settings = settings
        self._user_id: Optional[str] = None
        self._handlers: list[IdentityHandler] = []

    @property
    def current_user_id(self) -> Optional[str]:
        return self._user_id

    def on_identity_change(self, handler: IdentityHandler) -> Callable[[], None]:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    async def sign_in_anonymous(self) -> str:
        if not self._settings.allow_anonymous:
            raise AnonymousSignInDisabledError("anonymous sign-in is disabled")
        user_id = str(uuid.uuid4())
        logger.info("Signed in anonymously as %s", user_id)
        self._set_user(user_id)
        return user_id

    async def sign_in_with_token(self, token: str) -> str:
        user_id = decode_custom_token(token, self._settings)
        logger.info("Signed in with custom token as %s", user_id)
        self._set_user(user_id)
        return user_id

    def sign_out(self) -> None:
        if self._user_id is not None:
            logger.info("User %s signed out", self._user_id)
        self._set_user(None)

    def issue_token(self, user_id: str) -> str:
        return create_custom_token(user_id, self._settings)

    def _set_user(self, user_id: Optional[str]) -> None:
        if user_id == self._user_id:
            return
        self._user_id = user_id
        for handler in list(self._handlers):
            try:
                handler(user_id)
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("Identity change handler %r failed: %s", handler, exc)
