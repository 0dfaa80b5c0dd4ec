"""Protocol definitions for dependency injection."""

from typing import Protocol

from chatmedia.domain.media import Category, PageResult


class MediaSourcePort(Protocol):
    async def fetch_page(
        self, server_query_type: str, page: int, page_size: int
    ) -> PageResult: ...

    async def aclose(self) -> None: ...


class PageFetcherPort(Protocol):
    async def fetch_page(self, category: Category, page: int) -> PageResult: ...

    async def aclose(self) -> None: ...