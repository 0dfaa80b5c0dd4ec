"""Core interfaces and errors.

Import AppContainer from chatmedia.core.di_container.
"""

from .errors import FetchFailure, UnknownCategoryError
from .protocols import MediaSourcePort, PageFetcherPort

__all__ = [
    "FetchFailure",
    "MediaSourcePort",
    "PageFetcherPort",
    "UnknownCategoryError",
]
