"""Manager classes for loader state."""

from .category_selector import CategorySelector
from .fetch_coordinator import FetchCoordinator
from .pagination_manager import PaginationManager
from .result_accumulator import ResultAccumulator

__all__ = [
    "CategorySelector",
    "FetchCoordinator",
    "PaginationManager",
    "ResultAccumulator",
]
