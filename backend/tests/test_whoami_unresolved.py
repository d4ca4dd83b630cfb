"""
Tests for requests whose client address cannot be resolved
"""

import pytest
from httpx import AsyncClient, ASGITransport

from clientip.main import app


@pytest.mark.asyncio
async def test_whoami_reports_null_address_without_error():
    transport = ASGITransport(app=app, client=("not-an-address", 0))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/whoami", headers={"X-Forwarded-For": "unknown, unknown"})

    assert response.status_code == 200
    assert response.json() == {"address": None, "version": None, "source": None}


@pytest.mark.asyncio
async def test_whoami_reports_ipv4_mapped_address_as_version_4():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/whoami", headers={"X-Real-IP": "::ffff:198.51.100.2"})

    assert response.json() == {"address": "198.51.100.2", "version": 4, "source": "x-real-ip"}
