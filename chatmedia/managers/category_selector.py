"""Category (tab) switching."""

import logging
from typing import Optional, Sequence

from chatmedia.core.errors import UnknownCategoryError

logger = logging.getLogger("ChatMedia.CategorySelector")


class CategorySelector:
    """Tracks which category is visible.

    Switching never fetches and never touches any feed.
    """

    def __init__(self, category_ids: Sequence[str], initial: Optional[str] = None):
        """Initialize CategorySelector.

        Args:
            category_ids: Configured category ids, in display order
            initial: Category to show first (defaults to the first one)
        """
        if not category_ids:
            raise ValueError("CategorySelector needs at least one category")
        self.category_ids = tuple(category_ids)
        self.current_category = self.category_ids[0]
        if initial is not None:
            self.switch(initial)

    def switch(self, category_id: str) -> None:
        """Make a category the visible one.

        Args:
            category_id: Id of the configured category to show
        """
        if category_id not in self.category_ids:
            raise UnknownCategoryError(category_id)
        logger.debug(f"Category switched to: {category_id}")
        self.current_category = category_id

    def get_current_category(self) -> str:
        """Get the currently visible category.

        Returns:
            The current category id
        """
        return self.current_category
