"""Append-only merging of fetched pages into a feed."""

from chatmedia.domain.media import CategoryFeed, PageResult, PaginationState


class ResultAccumulator:
    def accumulate(self, feed: CategoryFeed, page: int, result: PageResult) -> None:
        # No dedup by id: overlapping pages from the server show up twice.
        feed.items.extend(result.items)
        feed.state = PaginationState(
            page=page, has_more=result.has_more, is_loading_more=False
        )
