"""Catalog and favorites browsing controller."""

from typing import Optional

from arpreview.client.api import APIError, FavoritesAPI, ModelsAPI
from arpreview.client.records import CatalogItem
from arpreview.utils import get_logger

logger = get_logger("client.catalog")

ALL_CATEGORIES = "All"
CATEGORIES = [ALL_CATEGORIES, "Furniture", "Electronics", "Toys", "Home Decor"]


class CatalogBrowser:
    """
    Backs the catalog and favorites lists.

    Load failures are logged and leave the previously loaded items in
    place; refreshing is always user initiated.
    """

    def __init__(self, models_api: ModelsAPI, favorites_api: FavoritesAPI):
        self.models_api = models_api
        self.favorites_api = favorites_api
        self.selected_category: Optional[str] = None
        self.items: list[CatalogItem] = []
        self.favorites: list[CatalogItem] = []
        self.loading = False

    @property
    def categories(self) -> list[str]:
        return list(CATEGORIES)

    def select_category(self, category: Optional[str]) -> None:
        """Choose a category chip; "All" or None clears the filter."""
        if category == ALL_CATEGORIES:
            category = None
        self.selected_category = category

    async def refresh(self) -> list[CatalogItem]:
        """Reload the catalog for the selected category."""
        self.loading = True
        try:
            self.items = await self.models_api.list(self.selected_category)
        except APIError as e:
            logger.error(f"Load models error: {e}")
        finally:
            self.loading = False
        return self.items

    async def load_favorites(self) -> list[CatalogItem]:
        """Reload the current user's favorites."""
        self.loading = True
        try:
            self.favorites = await self.favorites_api.list()
        except APIError as e:
            logger.error(f"Load favorites error: {e}")
        finally:
            self.loading = False
        return self.favorites
