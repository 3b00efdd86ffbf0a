"""Favorites repository: the user/model bookmark relation."""

from typing import List
from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db.models import CatalogModel, Favorite
from arpreview.db.repositories.base import BaseRepository


class FavoriteRepository(BaseRepository[Favorite]):
    """Repository for Favorite entities."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Favorite)

    async def get_model_ids(self, user_id: str) -> List[str]:
        """Ids of a user's favorite models, oldest favorite first."""
        result = await self.session.execute(
            select(Favorite.model_id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at)
        )
        return list(result.scalars().all())

    async def get_models(self, user_id: str) -> List[CatalogModel]:
        """A user's favorite models, oldest favorite first."""
        result = await self.session.execute(
            select(CatalogModel)
            .join(Favorite, Favorite.model_id == CatalogModel.id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.created_at)
        )
        return list(result.scalars().all())

    async def exists(self, user_id: str, model_id: str) -> bool:
        result = await self.session.execute(
            select(func.count(Favorite.id)).where(
                Favorite.user_id == user_id,
                Favorite.model_id == model_id,
            )
        )
        return (result.scalar() or 0) > 0

    async def add(self, user_id: str, model_id: str) -> Favorite:
        return await self.create(user_id=user_id, model_id=model_id)

    async def remove(self, user_id: str, model_id: str) -> bool:
        """Remove a favorite; removing one that is absent is not an error."""
        result = await self.session.execute(
            delete(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.model_id == model_id,
            )
        )
        return result.rowcount > 0
