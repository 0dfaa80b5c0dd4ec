"""Domain types."""

from .media import Category, CategoryFeed, Item, PageResult, PaginationState

__all__ = ["Category", "CategoryFeed", "Item", "PageResult", "PaginationState"]
