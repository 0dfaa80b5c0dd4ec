"""Media sources and the page fetching boundary."""

from .http_media_source import HttpMediaSource
from .page_fetcher import PageFetcher
from .websocket_media_source import WebSocketMediaSource

__all__ = ["HttpMediaSource", "PageFetcher", "WebSocketMediaSource"]
