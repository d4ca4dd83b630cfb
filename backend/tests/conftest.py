"""
Pytest fixtures for clientip backend tests
"""

import pytest
from typing import AsyncGenerator

from httpx import AsyncClient, ASGITransport
from clientip.main import app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints (peer address 127.0.0.1)."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def public_ip() -> str:
    """A documentation-range address standing in for a real client."""
    return "203.0.113.5"


@pytest.fixture
def proxy_ip() -> str:
    """A private address standing in for an intermediate proxy."""
    return "10.0.0.1"
