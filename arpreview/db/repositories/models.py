"""Catalog model repository."""

from typing import Optional, List
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db.models import CatalogModel, Favorite
from arpreview.db.repositories.base import BaseRepository


class CatalogModelRepository(BaseRepository[CatalogModel]):
    """Repository for CatalogModel entities."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, CatalogModel)

    async def list_models(self, category: Optional[str] = None) -> List[CatalogModel]:
        """List models newest first, optionally restricted to one category.

        The category must match exactly, including case.
        """
        query = select(CatalogModel)
        if category:
            query = query.where(CatalogModel.category == category)
        query = query.order_by(CatalogModel.created_at.desc())
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def create_model(
        self,
        name: str,
        category: str,
        model_url: str,
        thumbnail: str,
        description: Optional[str] = None,
        scale: Optional[float] = None,
    ) -> CatalogModel:
        """Create a new catalog entry."""
        model = CatalogModel(
            name=name,
            category=category,
            model_url=model_url,
            thumbnail=thumbnail,
            description=description,
            scale=1.0 if scale is None else scale,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return model

    async def delete_model(self, model_id: str) -> bool:
        """Delete a model and every favorite pointing at it."""
        await self.session.execute(delete(Favorite).where(Favorite.model_id == model_id))
        return await self.delete(model_id)

    async def delete_all(self) -> int:
        """Remove the whole catalog (used when reseeding)."""
        await self.session.execute(delete(Favorite))
        result = await self.session.execute(delete(CatalogModel))
        return result.rowcount or 0
