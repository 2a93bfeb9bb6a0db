"""First sign-in of a session."""

from __future__ import annotations

import logging
from typing import Optional

from .exceptions import IdentityBootstrapError, IdentityError
from .provider import IdentityProvider

logger = logging.getLogger(__name__)


async def bootstrap_identity(provider: IdentityProvider, initial_token: Optional[str] = None) -> str:
    """Sign in with ``initial_token`` if given, falling back to anonymous sign-in."""
    if initial_token:
        try:
            return await provider.sign_in_with_token(initial_token)
        except IdentityError as exc:
            logger.error("Custom token sign-in failed, trying anonymous sign-in: %s", exc)

    try:
        return await provider.sign_in_anonymous()
    except IdentityError as exc:
        logger.error("Anonymous sign-in failed: %s", exc)
        raise IdentityBootstrapError("no sign-in method succeeded") from exc
