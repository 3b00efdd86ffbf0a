"""FastAPI application for the AR Product Preview backend."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from arpreview import __version__
from arpreview.config import get_settings
from arpreview.db import init_db, close_db
from arpreview.utils import get_logger
from arpreview.api.routes import (
    auth_router,
    models_router,
    favorites_router,
)

logger = get_logger("api")

# API configuration
API_TITLE = "AR Product Preview API"
API_PREFIX = "/api"
API_DESCRIPTION = """
Catalog, accounts and favorites for the AR Product Preview app.

## Authentication
Write endpoints and everything under `/favorites` require
`Authorization: Bearer <token>`; tokens come from `/auth/register` and
`/auth/login`.
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting AR Product Preview API...")
    await init_db()
    yield
    logger.info("Shutting down AR Product Preview API...")
    await close_db()


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return errors


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=API_TITLE,
        version=__version__,
        description=API_DESCRIPTION,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["Authentication"])
    app.include_router(models_router, prefix=f"{API_PREFIX}/models", tags=["Models"])
    app.include_router(favorites_router, prefix=f"{API_PREFIX}/favorites", tags=["Favorites"])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"errors": _validation_errors(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(status_code=500, content={"message": "Server error"})

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "version": __version__}

    return app


# Create the app instance
app = create_app()
