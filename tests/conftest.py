"""
Shared test fixtures.

The API is exercised in-process through httpx's ``ASGITransport``; no
server is started.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.middleware import limiter
from src.domain.entities import Coordinate


# ── Well-known points ─────────────────────────────────────────────────

MOSCOW = Coordinate(55.7558, 37.6173)
SAINT_PETERSBURG = Coordinate(59.9311, 30.3609)
PARIS = Coordinate(48.8566, 2.3522)
LONDON = Coordinate(51.5074, -0.1278)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def app():
    limiter.reset()
    return create_app()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
