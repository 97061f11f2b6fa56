"""API test fixtures — FastAPI app over an in-process httpx client.

Invariants:
    - Every test gets a fresh AsyncClient bound to the ASGI app
    - dependency_overrides cleared after each test

Design Decisions:
    - ASGITransport: no network, no server process; lifespan is not run,
      so logging stays as pytest configured it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from dvdshop.main import app


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
