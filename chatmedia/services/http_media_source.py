"""HTTP media source for the chat API."""

import logging
from typing import Optional

import httpx

from chatmedia.core.errors import FetchFailure
from chatmedia.domain.media import PageResult
from chatmedia.services.media_helpers import build_request, parse_media_page

logger = logging.getLogger("ChatMedia.HttpMediaSource")

ENDPOINT = "citadel_hub/getChatMedia"


class HttpMediaSource:
    """Fetches media pages with a JSON POST per page."""

    def __init__(
        self,
        base_url: str,
        chat_room_id: int,
        token: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.chat_room_id = chat_room_id
        self.token = token
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    @property
    def url(self) -> str:
        return f"{self.base_url}/{ENDPOINT}"

    async def fetch_page(
        self, server_query_type: str, page: int, page_size: int
    ) -> PageResult:
        payload = build_request(
            server_query_type, page, page_size, self.chat_room_id, self.token
        )
        logger.debug(f"POST {self.url} media_type={server_query_type} page={page}")
        try:
            response = await self._client.post(self.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise FetchFailure(
                f"API call failed: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailure(f"API call error: {e}") from e
        except ValueError as e:
            raise FetchFailure(f"Invalid JSON from {self.url}: {e}") from e

        return parse_media_page(data, page_size)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
