"""API route modules."""

from arpreview.api.routes.auth import router as auth_router
from arpreview.api.routes.models import router as models_router
from arpreview.api.routes.favorites import router as favorites_router

__all__ = [
    "auth_router",
    "models_router",
    "favorites_router",
]
