"""Fixtures running the full application against a throwaway SQLite store."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from minicini.config import Settings
from minicini.main import create_app


@pytest_asyncio.fixture
async def app(tmp_path):
    settings = Settings(
        _env_file=None,
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'watchlist.db'}",
        log_level="WARNING",
    )
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
