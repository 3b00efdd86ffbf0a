"""FastAPI bearer-token authentication dependencies."""

from typing import Optional, Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.auth.jwt import decode_token
from arpreview.db import get_db
from arpreview.db.models import User
from arpreview.db.repositories.users import UserRepository
from arpreview.utils import get_logger

logger = get_logger("auth.middleware")

bearer_scheme = HTTPBearer(auto_error=False)

NO_TOKEN = "No token, authorization denied"
INVALID_TOKEN = "Token is not valid"


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    db: AsyncSession = Depends(get_db),
) -> User:
    """Resolve the bearer token to a user record.

    Raises HTTPException if the token is missing, invalid, expired, or
    belongs to a user that no longer exists.
    """
    if not credentials:
        raise _unauthorized(NO_TOKEN)

    payload = decode_token(credentials.credentials)
    if not payload:
        raise _unauthorized(INVALID_TOKEN)

    user = await UserRepository(db).get_by_id(payload.sub)
    if not user:
        logger.warning(f"Token for unknown user {payload.sub}")
        raise _unauthorized(INVALID_TOKEN)

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
