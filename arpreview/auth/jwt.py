"""JWT token handling for authentication."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from dataclasses import dataclass

import jwt
from jwt.exceptions import InvalidTokenError, ExpiredSignatureError

from arpreview.config import get_settings
from arpreview.utils import get_logger

logger = get_logger("auth.jwt")


@dataclass
class TokenPayload:
    """JWT token payload structure."""
    sub: str  # User ID
    email: str
    exp: datetime
    iat: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for JWT encoding."""
        return {
            "sub": self.sub,
            "email": self.email,
            "exp": self.exp,
            "iat": self.iat,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TokenPayload":
        """Create from dictionary (decoded JWT)."""
        return cls(
            sub=data["sub"],
            email=data.get("email", ""),
            exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(data["iat"], tz=timezone.utc),
        )


def create_access_token(
    user_id: str,
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create a new access token."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(days=settings.access_token_expire_days)

    payload = TokenPayload(sub=user_id, email=email, exp=expire, iat=now)

    token = jwt.encode(payload.to_dict(), settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
    logger.debug(f"Created access token for user {user_id}")
    return token


def decode_token(token: str) -> Optional[TokenPayload]:
    """Decode a token and return the payload, or None if it is not valid."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        return TokenPayload.from_dict(payload)
    except ExpiredSignatureError:
        logger.debug("Token has expired")
        return None
    except (InvalidTokenError, KeyError) as e:
        logger.warning(f"Failed to decode token: {e}")
        return None
