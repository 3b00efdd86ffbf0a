"""Authentication session for the client.

The session is an ordinary object that screens and controllers receive
explicitly. It owns the bearer token and the current user, and persists
the token through a pluggable TokenStore.
"""

import json
from pathlib import Path
from typing import Optional, Protocol

from arpreview.client.api import APIClient, APIError
from arpreview.config import get_settings
from arpreview.utils import get_logger

logger = get_logger("client.session")

MIN_PASSWORD_LENGTH = 6


class ValidationError(ValueError):
    """Input rejected before contacting the server."""


class TokenStore(Protocol):
    def load(self) -> Optional[str]: ...

    def save(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryTokenStore:
    """Keeps the token for the lifetime of the process only."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def load(self) -> Optional[str]:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileTokenStore:
    """Persists the token as a small JSON document."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else get_settings().data_dir / "session.json"

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text())
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed session file {self.path}")
            return None
        token = data.get("token")
        return token if isinstance(token, str) else None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token}))

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class AuthSession:
    """
    Current token and user.

    Binds itself to the API client as its token provider, so every request
    made through that client carries the session's token.
    """

    def __init__(self, api: APIClient, store: Optional[TokenStore] = None):
        self.api = api
        self.store = store or MemoryTokenStore()
        self.token: Optional[str] = None
        self.user: Optional[dict] = None
        self.loading = False
        api.token_provider = lambda: self.token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    async def restore(self) -> bool:
        """Resume a persisted session.

        Returns:
            True if a stored token was found and accepted by the server
        """
        self.loading = True
        try:
            stored = self.store.load()
            if not stored:
                return False
            self.token = stored
            self.user = await self.api.auth.me()
            return True
        except APIError as e:
            logger.error(f"Load auth error: {e}")
            self.token = None
            self.user = None
            self.store.clear()
            return False
        finally:
            self.loading = False

    async def login(self, email: str, password: str) -> dict:
        """Log in and persist the returned token."""
        if not email or not password:
            raise ValidationError("Please fill in all fields")
        data = await self.api.auth.login(email, password)
        self._accept(data)
        logger.info(f"Logged in as {email}")
        return self.user

    async def register(self, email: str, password: str, name: str) -> dict:
        """Create an account and persist the returned token."""
        if not name or not email or not password:
            raise ValidationError("Please fill in all fields")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        data = await self.api.auth.register(email, password, name)
        self._accept(data)
        logger.info(f"Registered {email}")
        return self.user

    def logout(self) -> None:
        self.store.clear()
        self.token = None
        self.user = None

    def _accept(self, data: dict) -> None:
        self.token = data["token"]
        self.user = data["user"]
        self.store.save(self.token)
