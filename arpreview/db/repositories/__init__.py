"""Repository classes for database access.

Implements the repository pattern for clean data access abstraction.
"""

from arpreview.db.repositories.base import BaseRepository
from arpreview.db.repositories.users import UserRepository
from arpreview.db.repositories.models import CatalogModelRepository
from arpreview.db.repositories.favorites import FavoriteRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "CatalogModelRepository",
    "FavoriteRepository",
]
