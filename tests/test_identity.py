from datetime import timedelta

import pytest

from labelsheet.core.config import IdentitySettings
from labelsheet.modules.identity import (
    AnonymousSignInDisabledError,
    IdentityBootstrapError,
    IdentityProvider,
    InvalidTokenError,
    bootstrap_identity,
    create_custom_token,
)

SETTINGS = IdentitySettings(secret_key="test-secret-key")


async def test_anonymous_sign_in_notifies_subscribers():
    provider = IdentityProvider(SETTINGS)
    seen = []
    provider.on_identity_change(seen.append)

    user_id = await provider.sign_in_anonymous()

    assert provider.current_user_id == user_id
    assert seen == [user_id]


async def test_anonymous_sign_in_can_be_disabled():
    provider = IdentityProvider(IdentitySettings(secret_key="test-secret-key", allow_anonymous=False))

    with pytest.raises(AnonymousSignInDisabledError):
        await provider.sign_in_anonymous()


async def test_issued_token_signs_in_same_user():
    token = IdentityProvider(SETTINGS).issue_token("user-42")

    provider = IdentityProvider(SETTINGS)
    assert await provider.sign_in_with_token(token) == "user-42"
    assert provider.current_user_id == "user-42"


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        create_custom_token("user-42", IdentitySettings(secret_key="another-secret")),
        create_custom_token("user-42", SETTINGS, expires_delta=timedelta(minutes=-5)),
    ],
)
async def test_bad_tokens_are_rejected(token):
    provider = IdentityProvider(SETTINGS)

    with pytest.raises(InvalidTokenError):
        await provider.sign_in_with_token(token)
    assert provider.current_user_id is None


async def test_unsubscribe_and_sign_out():
    provider = IdentityProvider(SETTINGS)
    seen = []
    unsubscribe = provider.on_identity_change(seen.append)
    user_id = await provider.sign_in_anonymous()

    provider.sign_out()
    unsubscribe()
    await provider.sign_in_anonymous()

    assert seen == [user_id, None]


async def test_failing_handler_does_not_block_others():
    provider = IdentityProvider(SETTINGS)
    seen = []

    def broken(user_id):
        raise RuntimeError("boom")

    provider.on_identity_change(broken)
    provider.on_identity_change(seen.append)

    user_id = await provider.sign_in_anonymous()

    assert seen == [user_id]


async def test_bootstrap_prefers_token():
    provider = IdentityProvider(SETTINGS)
    token = provider.issue_token("user-7")

    assert await bootstrap_identity(provider, token) == "user-7"


async def test_bootstrap_falls_back_to_anonymous():
    provider = IdentityProvider(SETTINGS)

    user_id = await bootstrap_identity(provider, "garbage")

    assert user_id == provider.current_user_id
    assert user_id != "garbage"


@pytest.mark.parametrize("token", [None, "garbage"])
async def test_bootstrap_fails_when_nothing_works(token):
    provider = IdentityProvider(IdentitySettings(secret_key="test-secret-key", allow_anonymous=False))

    with pytest.raises(IdentityBootstrapError):
        await bootstrap_identity(provider, token)
    assert provider.current_user_id is None
