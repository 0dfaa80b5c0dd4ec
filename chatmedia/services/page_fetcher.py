"""Page fetching boundary between the loader and a media source."""

import logging

from chatmedia.core.protocols import MediaSourcePort
from chatmedia.domain.media import Category, PageResult

logger = logging.getLogger("ChatMedia.PageFetcher")


class PageFetcher:
    """Fetches one page of a category, never raising to the caller.

    Any failure from the source becomes an empty, exhausted page. A category
    that fails once therefore looks finished and is not retried.
    """

    def __init__(self, source: MediaSourcePort, page_size: int):
        self.source = source
        self.page_size = page_size

    async def fetch_page(self, category: Category, page: int) -> PageResult:
        try:
            return await self.source.fetch_page(
                category.server_query_type, page, self.page_size
            )
        except Exception as e:
            logger.warning(
                f"Failed to fetch {category.id} page {page}: {type(e).__name__}: {e}"
            )
            return PageResult.empty()

    async def aclose(self) -> None:
        await self.source.aclose()
