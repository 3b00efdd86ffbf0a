"""Favorites routes for the current user."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db import get_db
from arpreview.db.repositories.favorites import FavoriteRepository
from arpreview.db.repositories.models import CatalogModelRepository
from arpreview.auth.middleware import CurrentUser
from arpreview.api.routes.models import ModelResponse
from arpreview.utils import get_logger

logger = get_logger("api.favorites")
router = APIRouter()

ALREADY_FAVORITE = "Model already in favorites"


@router.get("", response_model=List[ModelResponse])
async def list_favorites(
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Get the user's favorite models."""
    models = await FavoriteRepository(db).get_models(current_user.id)
    return [ModelResponse(**m.to_dict()) for m in models]


@router.get("/check/{model_id}")
async def check_favorite(
    model_id: str,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Check whether a model is in the user's favorites."""
    is_favorite = await FavoriteRepository(db).exists(current_user.id, model_id)
    return {"isFavorite": is_favorite}


@router.post("/{model_id}")
async def add_favorite(
    model_id: str,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Add a model to favorites. Adding it twice is a client error."""
    if not await CatalogModelRepository(db).get_by_id(model_id):
        raise HTTPException(status_code=404, detail="Model not found")

    repo = FavoriteRepository(db)
    if await repo.exists(current_user.id, model_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_FAVORITE)

    try:
        await repo.add(current_user.id, model_id)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=ALREADY_FAVORITE)

    return {
        "message": "Model added to favorites",
        "favorites": await repo.get_model_ids(current_user.id),
    }


@router.delete("/{model_id}")
async def remove_favorite(
    model_id: str,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Remove a model from favorites. Always succeeds."""
    repo = FavoriteRepository(db)
    await repo.remove(current_user.id, model_id)
    await db.commit()

    return {
        "message": "Model removed from favorites",
        "favorites": await repo.get_model_ids(current_user.id),
    }
