"""Bearer token dependency for HTTP routes."""
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from labelsheet.modules.identity import InvalidTokenError, decode_custom_token

security = HTTPBearer()


async def get_current_owner(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> str:
    settings = request.app.state.container.settings
    try:
        return decode_custom_token(credentials.credentials, settings.identity)
    except InvalidTokenError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Could not validate credentials") from exc
