"""
Chat media loader settings
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chatmedia.domain.media import Category

logger = logging.getLogger("ChatMedia.Settings")


class LoaderSettings(BaseModel):
    """Pagination settings"""
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Number of items requested per page (1-100)"
    )


class ApiSettings(BaseModel):
    """Remote media source settings"""
    transport: Literal["http", "websocket"] = Field(
        default="http",
        description="Which media source to use"
    )
    base_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the chat API (http transport)"
    )
    websocket_uri: str = Field(
        default="ws://localhost:8765",
        description="WebSocket server URI (websocket transport)"
    )
    max_size: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Maximum WebSocket message size in bytes"
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')


class CategorySettings(BaseModel):
    """One browsable content stream"""
    id: str = Field(min_length=1)
    label: str
    server_query_type: str = Field(min_length=1)
    empty_text: str = ""

    def to_category(self) -> Category:
        return Category(
            id=self.id,
            display_label=self.label,
            server_query_type=self.server_query_type,
            empty_text=self.empty_text,
        )


def default_categories() -> List[CategorySettings]:
    return [
        CategorySettings(id="media", label="Media", server_query_type="image",
                         empty_text="No media shared yet"),
        CategorySettings(id="links", label="Links", server_query_type="link",
                         empty_text="No links shared yet"),
        CategorySettings(id="docs", label="Docs", server_query_type="file",
                         empty_text="No docs shared yet"),
    ]


class Settings(BaseModel):
    """Main settings model"""
    loader: LoaderSettings = Field(default_factory=LoaderSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)
    categories: List[CategorySettings] = Field(default_factory=default_categories)

    @field_validator('categories')
    @classmethod
    def validate_categories(cls, v: List[CategorySettings]) -> List[CategorySettings]:
        """Ensure at least one category and no repeated ids"""
        if not v:
            raise ValueError("at least one category is required")
        ids = [category.id for category in v]
        if len(set(ids)) != len(ids):
            raise ValueError(f"category ids must be unique, got {ids}")
        return v

    def build_categories(self) -> List[Category]:
        return [category.to_category() for category in self.categories]


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing settings YAML: {e}. Using default settings")
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except (ValidationError, TypeError) as e:
            logger.error(f"Invalid settings in {self.config_path}: {e}. Using default settings")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        logger.debug(f"  - Page size: {settings.loader.page_size}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def page_size(self) -> int:
        """Get the page size setting"""
        return self.settings.loader.page_size

    @property
    def categories(self) -> List[Category]:
        """Get the configured categories, in display order"""
        return self.settings.build_categories()
