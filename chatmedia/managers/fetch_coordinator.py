"""Fetch Coordinator - Loads and paginates every media category."""

import asyncio
import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple

from chatmedia.core.errors import UnknownCategoryError
from chatmedia.core.protocols import PageFetcherPort
from chatmedia.domain.media import Category, CategoryFeed, PageResult
from chatmedia.managers.category_selector import CategorySelector
from chatmedia.managers.pagination_manager import PaginationManager
from chatmedia.managers.result_accumulator import ResultAccumulator

logger = logging.getLogger("ChatMedia.FetchCoordinator")


class FetchCoordinator:
    """Owns one feed per category and the in-flight guard of each.

    Meant to run on a single asyncio loop. Every guard check and guard set
    happens before the first await of an operation, so a second call for the
    same category arriving while a fetch is pending sees the guard and returns.
    """

    def __init__(
        self,
        fetcher: PageFetcherPort,
        categories: Sequence[Category],
        accumulator: Optional[ResultAccumulator] = None,
        initial_category: Optional[str] = None,
    ):
        """Initialize FetchCoordinator.

        Args:
            fetcher: Page fetcher; a raised exception counts as an empty exhausted page
            categories: Configured categories, in display order
            accumulator: Merges fetched pages into feeds
            initial_category: Category visible first (defaults to the first one)
        """
        self.fetcher = fetcher
        self.categories = tuple(categories)
        ids = [category.id for category in self.categories]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate category ids: {ids}")
        self.accumulator = accumulator or ResultAccumulator()
        self._feeds: Dict[str, CategoryFeed] = {
            category.id: CategoryFeed(category=category) for category in self.categories
        }
        self.pagination = PaginationManager(self._feeds)
        self.selector = CategorySelector(
            [category.id for category in self.categories], initial=initial_category
        )
        self.loading = False
        self._mounted = True

    @property
    def mounted(self) -> bool:
        return self._mounted

    def _feed(self, category_id: str) -> CategoryFeed:
        try:
            return self._feeds[category_id]
        except KeyError:
            raise UnknownCategoryError(category_id) from None

    async def load_initial(self) -> None:
        """Fetch page 1 of every category that has not been loaded yet, concurrently."""
        if not self._mounted:
            logger.debug("load_initial ignored: coordinator unmounted")
            return

        pending = [
            category for category in self.categories
            if self.pagination.is_fresh(category.id)
        ]
        if not pending:
            return

        for category in pending:
            self.pagination.start_loading(category.id)

        start_time = time.monotonic()
        logger.info(f"Starting initial load of {[c.id for c in pending]}...")
        self.loading = True
        try:
            await asyncio.gather(
                *(self._fetch_and_accumulate(category, 1) for category in pending)
            )
        finally:
            self.loading = False
        logger.info(f"Initial load finished in {time.monotonic() - start_time:.2f} seconds")

    async def load_more(self, category_id: str) -> None:
        """Fetch the next page of one category unless it is loading or exhausted."""
        feed = self._feed(category_id)
        if not self._mounted:
            logger.debug(f"load_more({category_id}) ignored: coordinator unmounted")
            return
        if not self.pagination.can_load_more(category_id):
            logger.debug(f"load_more({category_id}) ignored: {feed.state}")
            return

        next_page = feed.state.page + 1
        self.pagination.start_loading(category_id)
        await self._fetch_and_accumulate(feed.category, next_page)

    async def _fetch_and_accumulate(self, category: Category, page: int) -> None:
        try:
            result = await self.fetcher.fetch_page(category, page)
        except asyncio.CancelledError:
            if self._mounted:
                self.pagination.set(category.id, is_loading_more=False)
            raise
        except Exception as e:
            logger.warning(
                f"Fetcher raised for {category.id} page {page}: {type(e).__name__}: {e}"
            )
            result = PageResult.empty()

        if not self._mounted:
            logger.debug(f"Dropping {category.id} page {page}: coordinator unmounted")
            return

        self.accumulator.accumulate(self._feeds[category.id], page, result)
        logger.debug(
            f"{category.id} page {page}: +{len(result.items)} items "
            f"(total {len(self._feeds[category.id].items)}, has_more={result.has_more})"
        )

    def switch_category(self, category_id: str) -> None:
        self.selector.switch(category_id)

    def get_feed(self, category_id: str) -> CategoryFeed:
        return self._feed(category_id).snapshot()

    def active_feed(self) -> CategoryFeed:
        return self.get_feed(self.selector.get_current_category())

    def tabs(self) -> List[Tuple[Category, int]]:
        """Categories in display order with their loaded item counts."""
        return [
            (category, len(self._feeds[category.id].items))
            for category in self.categories
        ]

    def unmount(self) -> None:
        """Tear down: results of fetches still in flight will not be applied."""
        logger.debug("Coordinator unmounted")
        self._mounted = False

    async def aclose(self) -> None:
        """Unmount and release the page fetcher and its media source."""
        self.unmount()
        await self.fetcher.aclose()
