"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import pytest

from otakugifs.client import Client
from otakugifs.http import HTTPClient


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "query": request.url.query.decode(),
                "headers": dict(request.headers),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient(client=httpx.AsyncClient(transport=transport), owns_client=True)
    return client, transport, calls


@pytest.fixture
def otaku_client(mock_transport):
    """Client wired to the recording transport."""
    transport, calls = mock_transport
    client = Client(httpx.AsyncClient(transport=transport), owns_http_client=True)
    return client, transport, calls


@pytest.fixture
def hanging_transport():
    """Transport whose requests never complete until released."""

    class HangingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.started = asyncio.Event()
            self.calls = 0

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            self.calls += 1
            self.started.set()
            await asyncio.Event().wait()
            return httpx.Response(200, json={"url": "https://cdn.example/never.gif"})

    return HangingTransport()
