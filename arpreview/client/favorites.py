"""Favorite toggle for a single catalog model.

Gates the favorite action on the auth session and mirrors the server's
favorite status for one model. Network failures never propagate out of
this class: a failed check reads as "not favorited", a failed toggle
keeps the previous state and raises a transient notice.
"""

from typing import Optional

from arpreview.client.api import APIError, FavoritesAPI
from arpreview.client.notices import FAVORITE_FAILED, LOGIN_REQUIRED, Notifier, emit
from arpreview.client.session import AuthSession
from arpreview.utils import get_logger

logger = get_logger("client.favorites")


class FavoriteToggle:
    """Favorite state of one model for the current session."""

    def __init__(
        self,
        model_id: str,
        favorites_api: FavoritesAPI,
        session: AuthSession,
        notify: Optional[Notifier] = None,
    ):
        self.model_id = model_id
        self.favorites_api = favorites_api
        self.session = session
        self.notify = notify
        self.is_favorite = False
        self.busy = False
        self.closed = False

    def close(self) -> None:
        """Stop applying responses; requests already in flight still finish."""
        self.closed = True

    async def check_favorite(self) -> bool:
        """Load the favorite status from the server.

        Returns:
            The resulting favorite status
        """
        if not self.session.is_authenticated:
            return self.is_favorite

        try:
            result = await self.favorites_api.check(self.model_id)
        except APIError as e:
            logger.error(f"Check favorite error: {e}")
            return self.is_favorite

        if self.closed:
            logger.debug(f"Dropping favorite status for {self.model_id}, view closed")
            return self.is_favorite

        self.is_favorite = result
        return self.is_favorite

    async def toggle_favorite(self) -> bool:
        """Add or remove the model from favorites.

        Without a logged-in user this only emits a login prompt.

        Returns:
            The resulting favorite status
        """
        if not self.session.is_authenticated:
            emit(self.notify, LOGIN_REQUIRED)
            return self.is_favorite

        if self.busy:
            return self.is_favorite

        self.busy = True
        try:
            if self.is_favorite:
                await self.favorites_api.remove(self.model_id)
            else:
                await self.favorites_api.add(self.model_id)
        except APIError as e:
            logger.error(f"Toggle favorite error for {self.model_id}: {e}")
            if not self.closed:
                emit(self.notify, FAVORITE_FAILED)
            return self.is_favorite
        finally:
            self.busy = False

        if not self.closed:
            self.is_favorite = not self.is_favorite
        return self.is_favorite
