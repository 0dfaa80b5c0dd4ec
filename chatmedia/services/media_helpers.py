"""Helper functions shared by the media sources"""

import logging
from typing import Any, Mapping

from chatmedia.core.errors import FetchFailure
from chatmedia.domain.media import Item, PageResult

logger = logging.getLogger("ChatMedia.MediaHelpers")


def build_request(
    server_query_type: str, page: int, page_size: int, chat_room_id: int, token: str
) -> dict:
    return {
        "token": token,
        "chat_room_id": chat_room_id,
        "media_type": server_query_type,
        "page": page,
        "page_size": page_size,
    }


def parse_media_page(data: Any, page_size: int) -> PageResult:
    """
    Convert a getChatMedia response body into a PageResult

    Args:
        data: Decoded JSON response
        page_size: Page size that was requested, used when the server
            omits has_more

    Returns:
        PageResult with the items in server order

    Raises:
        FetchFailure: if the body is not a media page
    """
    if not isinstance(data, Mapping):
        raise FetchFailure(f"Unexpected response body: {type(data).__name__}")

    records = data.get("media") or []
    if not isinstance(records, list):
        raise FetchFailure("Response field 'media' is not a list")

    try:
        items = tuple(Item.from_api(record) for record in records)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise FetchFailure(f"Malformed media record: {e}") from e

    has_more = data.get("has_more")
    if not isinstance(has_more, bool):
        has_more = len(items) == page_size
    logger.debug(f"Parsed {len(items)} media records (has_more={has_more})")
    return PageResult(items=items, has_more=has_more)
