"""SQLAlchemy ORM models for AR Product Preview.

Users, catalog models, and the favorites relation between them.
"""

from datetime import datetime
from typing import Optional, List
from uuid import uuid4

from sqlalchemy import String, Float, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_uuid() -> str:
    """Generate a UUID string."""
    return str(uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class User(Base):
    """User account."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    def to_dict(self, favorites: Optional[List[str]] = None) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "favorites": favorites or [],
        }


class CatalogModel(Base):
    """A 3D product model that can be previewed in AR."""
    __tablename__ = "models"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    model_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    thumbnail: Mapped[str] = mapped_column(String(1024), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    scale: Mapped[float] = mapped_column(Float, default=1.0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "category": self.category,
            "modelUrl": self.model_url,
            "thumbnail": self.thumbnail,
            "description": self.description,
            "scale": self.scale,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class Favorite(Base):
    """A model bookmarked by a user. Each pair exists at most once."""
    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "model_id", name="uq_favorite_user_model"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), index=True)
    model_id: Mapped[str] = mapped_column(String(36), ForeignKey("models.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
