"""Sample catalog used to populate a fresh database."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from arpreview.db.models import CatalogModel
from arpreview.db.repositories.models import CatalogModelRepository
from arpreview.utils import get_logger

logger = get_logger("db.seed")

_SAMPLES = "https://raw.githubusercontent.com/KhronosGroup/glTF-Sample-Models/master/2.0"

SAMPLE_MODELS = [
    {
        "name": "Modern Chair",
        "category": "Furniture",
        "model_url": f"{_SAMPLES}/Chair/glTF-Binary/Chair.glb",
        "thumbnail": "https://images.unsplash.com/photo-1506439773649-6e0eb8cfb237?w=400",
        "description": "A modern comfortable chair",
        "scale": 1.0,
    },
    {
        "name": "Coffee Table",
        "category": "Furniture",
        "model_url": f"{_SAMPLES}/Box/glTF-Binary/Box.glb",
        "thumbnail": "https://images.unsplash.com/photo-1532372320572-cda25653a26d?w=400",
        "description": "Stylish coffee table",
        "scale": 1.0,
    },
    {
        "name": "Lamp",
        "category": "Home Decor",
        "model_url": f"{_SAMPLES}/Lantern/glTF-Binary/Lantern.glb",
        "thumbnail": "https://images.unsplash.com/photo-1507473885765-e6ed057f782c?w=400",
        "description": "Decorative lamp",
        "scale": 1.0,
    },
    {
        "name": "Robot Toy",
        "category": "Toys",
        "model_url": f"{_SAMPLES}/RobotExpressive/glTF-Binary/RobotExpressive.glb",
        "thumbnail": "https://images.unsplash.com/photo-1555255707-c07966088b7b?w=400",
        "description": "Expressive robot toy",
        "scale": 0.5,
    },
    {
        "name": "Smartphone",
        "category": "Electronics",
        "model_url": f"{_SAMPLES}/Box/glTF-Binary/Box.glb",
        "thumbnail": "https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?w=400",
        "description": "Latest smartphone model",
        "scale": 0.3,
    },
]


async def seed_catalog(session: AsyncSession, replace: bool = True) -> List[CatalogModel]:
    """Insert the sample models, clearing the existing catalog first if asked."""
    repo = CatalogModelRepository(session)
    if replace:
        removed = await repo.delete_all()
        logger.info(f"Cleared {removed} existing models")

    inserted = [await repo.create_model(**sample) for sample in SAMPLE_MODELS]
    logger.info(f"Inserted {len(inserted)} sample models")
    return inserted
