"""Sign-in endpoints issuing custom bearer tokens."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from labelsheet.core.container import ApplicationContainer
from labelsheet.interfaces.http.deps import get_container
from labelsheet.modules.identity import IdentityError, IdentityProvider
from labelsheet.schemas import IdentityResponse, TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/anonymous", response_model=IdentityResponse, summary="Anonymous sign-in")
async def sign_in_anonymous(
    container: ApplicationContainer = Depends(get_container),
) -> IdentityResponse:
    provider = IdentityProvider(container.settings.identity)
    try:
        user_id = await provider.sign_in_anonymous()
    except IdentityError as exc:
        logger.error("Anonymous sign-in rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Anonymous sign-in is disabled") from exc
    return IdentityResponse(user_id=user_id, token=provider.issue_token(user_id))


@router.post("/token", response_model=IdentityResponse, summary="Custom token sign-in")
async def sign_in_with_token(
    payload: TokenRequest,
    container: ApplicationContainer = Depends(get_container),
) -> IdentityResponse:
    provider = IdentityProvider(container.settings.identity)
    try:
        user_id = await provider.sign_in_with_token(payload.token)
    except IdentityError as exc:
        logger.error("Custom token sign-in rejected: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc
    return IdentityResponse(user_id=user_id, token=provider.issue_token(user_id))
