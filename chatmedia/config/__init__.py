"""Configuration management."""

from .settings import (
    ApiSettings,
    CategorySettings,
    LoaderSettings,
    Settings,
    SettingsManager,
)

__all__ = [
    "ApiSettings",
    "CategorySettings",
    "LoaderSettings",
    "Settings",
    "SettingsManager",
]
