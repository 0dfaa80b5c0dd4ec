"""Pagination state management for infinite scroll."""

from dataclasses import replace
from typing import Dict

from chatmedia.core.errors import UnknownCategoryError
from chatmedia.domain.media import CategoryFeed, PaginationState


class PaginationManager:
    """Per-category pagination state, stored on the feeds it is given."""

    def __init__(self, feeds: Dict[str, CategoryFeed]):
        self._feeds = feeds

    def _feed(self, category_id: str) -> CategoryFeed:
        try:
            return self._feeds[category_id]
        except KeyError:
            raise UnknownCategoryError(category_id) from None

    def get(self, category_id: str) -> PaginationState:
        return self._feed(category_id).state

    def set(self, category_id: str, **partial) -> PaginationState:
        feed = self._feed(category_id)
        feed.state = replace(feed.state, **partial)
        return feed.state

    def is_fresh(self, category_id: str) -> bool:
        state = self.get(category_id)
        return state.page == 0 and state.has_more and not state.is_loading_more

    def can_load_more(self, category_id: str) -> bool:
        state = self.get(category_id)
        return state.has_more and not state.is_loading_more

    def start_loading(self, category_id: str) -> None:
        self.set(category_id, is_loading_more=True)