"""Dependency injection container."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from chatmedia.config import Settings, SettingsManager
from chatmedia.core.protocols import MediaSourcePort
from chatmedia.managers import FetchCoordinator
from chatmedia.services import HttpMediaSource, PageFetcher, WebSocketMediaSource


@dataclass
class AppContainer:
    settings: Settings

    def create_media_source(self, chat_room_id: int, token: str) -> MediaSourcePort:
        api = self.settings.api
        if api.transport == "websocket":
            return WebSocketMediaSource(
                api.websocket_uri, chat_room_id, token, max_size=api.max_size
            )
        return HttpMediaSource(api.base_url, chat_room_id, token, timeout=api.timeout)

    def create_page_fetcher(self, source: MediaSourcePort) -> PageFetcher:
        return PageFetcher(source, page_size=self.settings.loader.page_size)

    def create_coordinator(
        self,
        chat_room_id: int,
        token: str,
        source: Optional[MediaSourcePort] = None,
    ) -> FetchCoordinator:
        """One coordinator per opened media screen."""
        source = source or self.create_media_source(chat_room_id, token)
        return FetchCoordinator(
            self.create_page_fetcher(source),
            self.settings.build_categories(),
        )

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        config_path: Optional[Path] = None,
    ) -> "AppContainer":
        if settings is None:
            settings = SettingsManager(config_path).settings
        return cls(settings=settings)
