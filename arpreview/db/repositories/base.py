"""Base repository with common CRUD operations."""

from typing import Generic, TypeVar, Type, Optional, List
from sqlalchemy import select, update, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db.models import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Base repository providing common CRUD operations."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def create(self, **kwargs) -> T:
        """Create a new entity."""
        entity = self.model(**kwargs)
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: str) -> Optional[T]:
        """Get entity by ID."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def update(self, entity_id: str, **kwargs) -> Optional[T]:
        """Update an entity and return the fresh row."""
        if kwargs:
            await self.session.execute(
                update(self.model)
                .where(self.model.id == entity_id)
                .values(**kwargs)
                .execution_options(synchronize_session="fetch")
            )
        entity = await self.get_by_id(entity_id)
        if entity is not None:
            await self.session.refresh(entity)
        return entity

    async def delete(self, entity_id: str) -> bool:
        """Delete an entity."""
        result = await self.session.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        return result.rowcount > 0

    async def count(self) -> int:
        """Count all entities."""
        result = await self.session.execute(select(func.count(self.model.id)))
        return result.scalar() or 0
