"""Client core for AR Product Preview.

REST access to the backend plus the controllers screens drive: the auth
session, the catalog browser and the favorite toggle.
"""

from arpreview.client.api import (
    APIClient,
    APIError,
    AuthAPI,
    ModelsAPI,
    FavoritesAPI,
)
from arpreview.client.records import CatalogItem
from arpreview.client.session import (
    AuthSession,
    FileTokenStore,
    MemoryTokenStore,
    ValidationError,
)
from arpreview.client.catalog import CatalogBrowser, CATEGORIES
from arpreview.client.favorites import FavoriteToggle
from arpreview.client.notices import Notice, NoticeKind

__all__ = [
    "APIClient",
    "APIError",
    "AuthAPI",
    "ModelsAPI",
    "FavoritesAPI",
    "CatalogItem",
    "AuthSession",
    "FileTokenStore",
    "MemoryTokenStore",
    "ValidationError",
    "CatalogBrowser",
    "CATEGORIES",
    "FavoriteToggle",
    "Notice",
    "NoticeKind",
]
