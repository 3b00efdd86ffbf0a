"""User repository for user-related database operations."""

from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db.models import User
from arpreview.db.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entities."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        result = await self.session.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def create_user(self, email: str, name: str, password_hash: str) -> User:
        """Create a new user."""
        user = User(
            email=email.strip().lower(),
            name=name.strip(),
            password_hash=password_hash,
        )
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
