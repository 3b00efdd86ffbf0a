"""Controller for the AR preview of one catalog model.

Wires a transform tracker and its gesture adapter to the favorite toggle
and handles asset-load failures reported by the engine.
"""

from typing import Any, Optional

from arpreview.ar.gestures import GestureAdapter
from arpreview.ar.transform import PlacementState, Renderer, TransformTracker
from arpreview.client.api import FavoritesAPI
from arpreview.client.favorites import FavoriteToggle
from arpreview.client.notices import MODEL_LOAD_FAILED, Notifier, emit
from arpreview.client.records import CatalogItem
from arpreview.client.session import AuthSession
from arpreview.utils import get_logger

logger = get_logger("ar.view")

PLACEMENT_PROMPT = "Point camera at a flat surface and tap to place"


class ARViewController:
    """
    State behind a single AR preview.

    A fresh controller (and therefore a fresh transform) is created every
    time the view is entered; nothing is kept after close().
    """

    def __init__(
        self,
        item: CatalogItem,
        session: AuthSession,
        favorites_api: FavoritesAPI,
        renderer: Optional[Renderer] = None,
        notify: Optional[Notifier] = None,
    ):
        self.item = item
        self.session = session
        self.notify = notify
        self.tracker = TransformTracker(renderer=renderer)
        self.gestures = GestureAdapter(self.tracker)
        self.favorite = FavoriteToggle(item.id, favorites_api, session, notify=notify)
        self.load_error: Optional[str] = None
        self._load_error_reported = False

    @property
    def state(self) -> PlacementState:
        return self.tracker.state

    @property
    def show_placement_prompt(self) -> bool:
        return not self.tracker.is_placed

    @property
    def asset_scale(self) -> list[float]:
        """Scale applied to the asset inside the manipulated node."""
        s = self.item.scale or 1.0
        return [s, s, s]

    @property
    def asset_url(self) -> Optional[str]:
        """URL of the asset to show, or None until the object is placed."""
        return self.item.model_url if self.tracker.is_placed else None

    async def open(self) -> None:
        """Load the favorite status for signed-in users."""
        logger.info(f"Opening AR view for {self.item.name}")
        if self.session.is_authenticated:
            await self.favorite.check_favorite()

    def close(self) -> None:
        self.favorite.close()

    async def toggle_favorite(self) -> bool:
        return await self.favorite.toggle_favorite()

    def on_asset_load_error(self, error: Any) -> None:
        """Report an asset failure once; placement is kept."""
        logger.error(f"Model load error for {self.item.model_url}: {error}")
        self.load_error = str(error)
        if self._load_error_reported:
            return
        self._load_error_reported = True
        emit(self.notify, MODEL_LOAD_FAILED)
