"""Shared fixtures for weekday service tests.

Caching uses the in-memory backend, so no Redis server is required.
"""

import os
import tempfile

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep log files out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="weekday-service-logs-"))
os.environ["REDIS_URL"] = ""


@pytest_asyncio.fixture()
async def client():
    """HTTP client bound to the app, with a fresh in-memory response cache."""
    from weekday_service.cache import init_cache
    from weekday_service.main import app

    await init_cache()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def lenient_client():
    """Like client, but server errors come back as responses instead of being re-raised."""
    from weekday_service.cache import init_cache
    from weekday_service.main import app

    await init_cache()

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
