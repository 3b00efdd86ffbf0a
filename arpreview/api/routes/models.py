"""Catalog model routes."""

from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, StringConstraints
from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db import get_db
from arpreview.db.repositories.models import CatalogModelRepository
from arpreview.auth.middleware import CurrentUser
from arpreview.utils import get_logger

logger = get_logger("api.models")
router = APIRouter()

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ModelResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    id: str = Field(alias="_id")
    name: str
    category: str
    model_url: str = Field(alias="modelUrl")
    thumbnail: str
    description: Optional[str] = None
    scale: float = 1.0
    created_at: Optional[str] = Field(default=None, alias="createdAt")


class ModelCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    name: NonBlank
    category: NonBlank
    model_url: HttpUrl = Field(alias="modelUrl")
    thumbnail: HttpUrl
    description: Optional[str] = None
    scale: Optional[float] = Field(default=None, gt=0)


class ModelUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    name: Optional[NonBlank] = None
    category: Optional[NonBlank] = None
    model_url: Optional[HttpUrl] = Field(default=None, alias="modelUrl")
    thumbnail: Optional[HttpUrl] = None
    description: Optional[str] = None
    scale: Optional[float] = Field(default=None, gt=0)

    def changes(self) -> dict:
        """Fields the client actually sent, ready for the database."""
        data = self.model_dump(exclude_unset=True)
        for key in ("model_url", "thumbnail"):
            if data.get(key) is not None:
                data[key] = str(data[key])
        # Required columns can't be cleared
        for key in ("name", "category", "model_url", "thumbnail", "scale"):
            if key in data and data[key] is None:
                del data[key]
        return data


@router.get("", response_model=List[ModelResponse])
async def list_models(
    category: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """List models, newest first, optionally filtered by exact category."""
    models = await CatalogModelRepository(db).list_models(category=category)
    return [ModelResponse(**m.to_dict()) for m in models]


@router.get("/{model_id}", response_model=ModelResponse)
async def get_model(
    model_id: str,
    db: AsyncSession = Depends(get_db)
):
    """Get a single model."""
    model = await CatalogModelRepository(db).get_by_id(model_id)
    if not model:
        raise HTTPException(status_code=404, detail="Model not found")
    return ModelResponse(**model.to_dict())


@router.post("", response_model=ModelResponse, status_code=status.HTTP_201_CREATED)
async def create_model(
    request: ModelCreate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Create a new model."""
    model = await CatalogModelRepository(db).create_model(
        name=request.name,
        category=request.category,
        model_url=str(request.model_url),
        thumbnail=str(request.thumbnail),
        description=request.description,
        scale=request.scale,
    )
    await db.commit()

    logger.info(f"Model created by {current_user.email}: {model.name} ({model.category})")
    return ModelResponse(**model.to_dict())


@router.put("/{model_id}", response_model=ModelResponse)
async def update_model(
    model_id: str,
    request: ModelUpdate,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Update a model."""
    repo = CatalogModelRepository(db)
    if not await repo.get_by_id(model_id):
        raise HTTPException(status_code=404, detail="Model not found")

    model = await repo.update(model_id, **request.changes())
    await db.commit()
    return ModelResponse(**model.to_dict())


@router.delete("/{model_id}")
async def delete_model(
    model_id: str,
    current_user: CurrentUser,
    db: AsyncSession = Depends(get_db)
):
    """Delete a model."""
    deleted = await CatalogModelRepository(db).delete_model(model_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Model not found")
    await db.commit()

    logger.info(f"Model {model_id} deleted by {current_user.email}")
    return {"message": "Model deleted successfully"}
