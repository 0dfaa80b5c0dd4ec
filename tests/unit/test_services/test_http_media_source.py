"""Tests for HttpMediaSource."""

import asyncio
import json

import httpx
import pytest

from chatmedia.core.errors import FetchFailure
from chatmedia.services.http_media_source import HttpMediaSource


def _source(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpMediaSource("https://hr.example.com/api/", chat_room_id=42, token="abc", client=client)


def _fetch(source, *args):
    async def run():
        try:
            return await source.fetch_page(*args)
        finally:
            await source._client.aclose()

    return asyncio.run(run())


def test_http_source_posts_page_request(api_record):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"media": [api_record], "has_more": True})

    result = _fetch(_source(handler), "image", 2, 20)

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://hr.example.com/api/citadel_hub/getChatMedia"
    assert json.loads(seen[0].content) == {
        "token": "abc",
        "chat_room_id": 42,
        "media_type": "image",
        "page": 2,
        "page_size": 20,
    }
    assert [item.id for item in result.items] == ["101"]
    assert result.has_more is True


def test_http_source_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "boom"})

    with pytest.raises(FetchFailure, match="500"):
        _fetch(_source(handler), "file", 1, 20)


def test_http_source_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailure):
        _fetch(_source(handler), "link", 1, 20)


def test_http_source_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>gateway</html>")

    with pytest.raises(FetchFailure):
        _fetch(_source(handler), "link", 1, 20)


def test_http_source_keeps_injected_client_open():
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    source = HttpMediaSource("https://hr.example.com/api", 1, "abc", client=client)

    async def run():
        await source.aclose()
        closed = client.is_closed
        await client.aclose()
        return closed

    assert asyncio.run(run()) is False
