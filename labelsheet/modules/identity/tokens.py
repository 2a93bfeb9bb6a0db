"""Signed custom tokens carrying a user id."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from labelsheet.core.config import IdentitySettings

from .exceptions import InvalidTokenError


def create_custom_token(
    user_id: str,
    settings: IdentitySettings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.token_expire_minutes)
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_custom_token(token: str, settings: IdentitySettings) -> str:
    """Return the user id carried by ``token``."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        raise InvalidTokenError("custom token could not be verified") from exc

    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        raise InvalidTokenError("custom token carries no user id")
    return user_id
