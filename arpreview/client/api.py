"""REST client for the AR Product Preview backend.

Thin async wrappers over the auth, models and favorites endpoints. Every
call either returns decoded JSON (or a typed record) or raises APIError;
nothing is retried automatically.
"""

import asyncio
from typing import Any, Callable, List, Optional

import aiohttp

from arpreview.client.records import CatalogItem
from arpreview.config import get_settings
from arpreview.utils import get_logger

logger = get_logger("client.api")

TokenProvider = Callable[[], Optional[str]]


class APIError(Exception):
    """A request failed at the network level or with a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload

    @property
    def is_network_error(self) -> bool:
        return self.status is None

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"{self.status}: {self.message}"


class APIClient:
    """
    Async HTTP client bound to one backend.

    Adds a bearer token to every request when the token provider returns
    one. The underlying aiohttp session is created on first use.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[TokenProvider] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:3000/api
            token_provider: Returns the current bearer token, or None
            timeout: Total request timeout in seconds
        """
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.token_provider = token_provider
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._session: Optional[aiohttp.ClientSession] = None

        self.auth = AuthAPI(self)
        self.models = ModelsAPI(self)
        self.favorites = FavoritesAPI(self)

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={"Content-Type": "application/json"},
            )
        return self._session

    def _get_headers(self) -> dict:
        token = self.token_provider() if self.token_provider else None
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[dict] = None,
        parse: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        """Send a request and decode the JSON response.

        Args:
            parse: Turns the decoded body into the caller's result; a body
                it cannot read is reported as an unexpected response

        Raises:
            APIError: on transport failure, timeout, non-2xx status, or a
                2xx body that does not have the expected shape
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        session = self._get_session()

        try:
            async with session.request(
                method,
                url,
                json=json,
                params=params,
                headers=self._get_headers(),
            ) as response:
                try:
                    data = await response.json(content_type=None)
                except ValueError:
                    data = None

                if response.status >= 400:
                    message = _error_message(data) or response.reason or "Request failed"
                    logger.warning(f"{method} {path} failed with {response.status}: {message}")
                    raise APIError(message, status=response.status, payload=data)

                if parse is None:
                    return data
                try:
                    return parse(data)
                except (KeyError, TypeError, ValueError) as e:
                    logger.warning(f"{method} {path} returned an unexpected body: {e}")
                    raise APIError("Unexpected response", status=response.status, payload=data) from e
        except asyncio.TimeoutError as e:
            logger.warning(f"{method} {path} timed out")
            raise APIError("Request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise APIError(f"Network error: {e}") from e


def _error_message(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    if data.get("message"):
        return str(data["message"])
    if data.get("errors"):
        first = data["errors"][0]
        return f"{first.get('field')}: {first.get('message')}"
    if data.get("detail"):
        return str(data["detail"])
    return None


# Response parsers. Each raises KeyError, TypeError or ValueError on a body
# of the wrong shape.

def _object(data: Any) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _auth_result(data: Any) -> dict:
    data = _object(data)
    if not data["token"] or not isinstance(data["user"], dict):
        raise ValueError("missing token or user")
    return data


def _items(data: Any) -> list[CatalogItem]:
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return [CatalogItem.from_dict(item) for item in data]


def _favorite_ids(data: Any) -> list[str]:
    ids = _object(data).get("favorites", [])
    if not isinstance(ids, list):
        raise TypeError("favorites is not a list")
    return [str(i) for i in ids]


def _is_favorite(data: Any) -> bool:
    return bool(_object(data).get("isFavorite", False))


class AuthAPI:
    """Registration, login and current-user lookups."""

    def __init__(self, client: APIClient):
        self.client = client

    async def register(self, email: str, password: str, name: str) -> dict:
        return await self.client.request(
            "POST",
            "/auth/register",
            json={"email": email, "password": password, "name": name},
            parse=_auth_result,
        )

    async def login(self, email: str, password: str) -> dict:
        return await self.client.request(
            "POST", "/auth/login", json={"email": email, "password": password}, parse=_auth_result
        )

    async def me(self) -> dict:
        return await self.client.request("GET", "/auth/me", parse=_object)


class ModelsAPI:
    """Catalog model records."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list(self, category: Optional[str] = None) -> List[CatalogItem]:
        params = {"category": category} if category else None
        return await self.client.request("GET", "/models", params=params, parse=_items)

    async def get(self, model_id: str) -> CatalogItem:
        return await self.client.request("GET", f"/models/{model_id}", parse=CatalogItem.from_dict)

    async def create(self, data: dict) -> CatalogItem:
        return await self.client.request("POST", "/models", json=data, parse=CatalogItem.from_dict)

    async def update(self, model_id: str, data: dict) -> CatalogItem:
        return await self.client.request("PUT", f"/models/{model_id}", json=data, parse=CatalogItem.from_dict)

    async def delete(self, model_id: str) -> dict:
        return await self.client.request("DELETE", f"/models/{model_id}", parse=_object)


class FavoritesAPI:
    """The current user's favorites."""

    def __init__(self, client: APIClient):
        self.client = client

    async def list(self) -> List[CatalogItem]:
        return await self.client.request("GET", "/favorites", parse=_items)

    async def add(self, model_id: str) -> List[str]:
        return await self.client.request("POST", f"/favorites/{model_id}", parse=_favorite_ids)

    async def remove(self, model_id: str) -> List[str]:
        return await self.client.request("DELETE", f"/favorites/{model_id}", parse=_favorite_ids)

    async def check(self, model_id: str) -> bool:
        return await self.client.request("GET", f"/favorites/check/{model_id}", parse=_is_favorite)
