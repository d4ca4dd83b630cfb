"""
Tests for the client address endpoint
"""

import pytest
from httpx import AsyncClient

from clientip.config import settings


@pytest.mark.asyncio
async def test_whoami_uses_forwarded_for_chain(client: AsyncClient, public_ip: str, proxy_ip: str):
    response = await client.get(
        "/whoami",
        headers={"X-Forwarded-For": f"unknown, {public_ip}, {proxy_ip}", "X-Real-IP": "198.51.100.2"},
    )
    assert response.status_code == 200
    assert response.json() == {"address": public_ip, "version": 4, "source": "x-forwarded-for"}


@pytest.mark.asyncio
async def test_whoami_uses_alternative_header(client: AsyncClient):
    response = await client.get("/whoami", headers={"CF-Connecting-IP": "2001:db8::7"})
    assert response.status_code == 200
    assert response.json() == {"address": "2001:db8::7", "version": 6, "source": "cf-connecting-ip"}


@pytest.mark.asyncio
async def test_whoami_falls_back_to_peer_address(client: AsyncClient):
    # ASGITransport reports the peer as 127.0.0.1
    response = await client.get("/whoami", headers={"X-Forwarded-For": "unknown"})
    assert response.status_code == 200
    assert response.json() == {"address": "127.0.0.1", "version": 4, "source": "peer"}


@pytest.mark.asyncio
async def test_whoami_hides_source_when_disabled(client: AsyncClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "EXPOSE_RESOLUTION_SOURCE", False)

    response = await client.get("/whoami", headers={"X-Real-IP": "198.51.100.2"})
    assert response.json() == {"address": "198.51.100.2", "version": 4, "source": None}
