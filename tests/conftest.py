"""Shared fixtures."""

import httpx
import pytest

from arpreview.api import create_app
from arpreview.config import Settings, configure
from arpreview.db import init_db, close_db, get_session


@pytest.fixture
def settings(tmp_path):
    """Isolated settings: in-memory database, throwaway data dir."""
    settings = Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        jwt_secret_key="test-secret",
        data_dir=tmp_path,
    )
    configure(settings)
    yield settings
    configure(None)


@pytest.fixture
async def api(settings):
    """HTTP client bound to a fresh app and empty database."""
    await close_db()
    await init_db()
    transport = httpx.ASGITransport(app=create_app())
    async with httpx.AsyncClient(transport=transport, base_url="http://test/api") as client:
        yield client
    await close_db()


@pytest.fixture
async def db_session(settings):
    """Session on a fresh in-memory database."""
    await close_db()
    await init_db()
    async with get_session() as session:
        yield session
    await close_db()
