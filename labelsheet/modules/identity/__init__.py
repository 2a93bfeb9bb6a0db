"""Public exports for session identity."""

from .bootstrap import bootstrap_identity
from .exceptions import (
    AnonymousSignInDisabledError,
    IdentityBootstrapError,
    IdentityError,
    InvalidTokenError,
)
from .provider import IdentityHandler, IdentityProvider
from .tokens import create_custom_token, decode_custom_token

__all__ = [
    "AnonymousSignInDisabledError",
    "IdentityBootstrapError",
    "IdentityError",
    "IdentityHandler",
    "IdentityProvider",
    "InvalidTokenError",
    "bootstrap_identity",
    "create_custom_token",
    "decode_custom_token",
]
