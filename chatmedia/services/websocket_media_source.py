"""WebSocket media source."""

import asyncio
import json
import logging

import websockets

from chatmedia.core.errors import FetchFailure
from chatmedia.domain.media import PageResult
from chatmedia.services.media_helpers import build_request, parse_media_page

logger = logging.getLogger("ChatMedia.WebSocketMediaSource")


class WebSocketMediaSource:
    """Requests media pages over a short-lived WebSocket connection per page."""

    def __init__(
        self,
        uri: str,
        chat_room_id: int,
        token: str,
        max_size: int = 10 * 1024 * 1024,
        open_timeout: float = 5,
    ):
        self.uri = uri
        self.chat_room_id = chat_room_id
        self.token = token
        self.max_size = max_size
        self.open_timeout = open_timeout

    async def fetch_page(
        self, server_query_type: str, page: int, page_size: int
    ) -> PageResult:
        request = {
            "action": "get_chat_media",
            **build_request(
                server_query_type, page, page_size, self.chat_room_id, self.token
            ),
        }
        try:
            async with websockets.connect(
                self.uri, max_size=self.max_size, open_timeout=self.open_timeout
            ) as websocket:
                await websocket.send(json.dumps(request))
                message = await websocket.recv()
        except (websockets.exceptions.WebSocketException, OSError, asyncio.TimeoutError) as e:
            raise FetchFailure(f"WebSocket error fetching {server_query_type} page {page}: {e}") from e

        try:
            data = json.loads(message)
        except ValueError as e:
            raise FetchFailure(f"Invalid JSON from {self.uri}: {e}") from e

        msg_type = data.get("type") if isinstance(data, dict) else None
        if msg_type == "error":
            raise FetchFailure(data.get("message") or "Server returned an error")
        if msg_type != "chat_media":
            raise FetchFailure(f"Unexpected reply type: {msg_type}")

        return parse_media_page(data, page_size)

    async def aclose(self) -> None:
        """Nothing to release: no connection is held between pages."""
