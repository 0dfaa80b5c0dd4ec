"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import List

import pytest

from chatmedia.domain.media import Category


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def categories() -> List[Category]:
    return [
        Category(id="media", display_label="Media", server_query_type="image",
                 empty_text="No media shared yet"),
        Category(id="links", display_label="Links", server_query_type="link",
                 empty_text="No links shared yet"),
        Category(id="docs", display_label="Docs", server_query_type="file",
                 empty_text="No docs shared yet"),
    ]


@pytest.fixture
def api_record() -> dict:
    return {
        "id": 101,
        "message_type": "image",
        "content": "",
        "image_url": "https://cdn.example.com/chat/101.jpg",
        "sender": {"first_name": "Asha", "last_name": "Rao"},
        "created_at": "2025-03-04T10:15:00Z",
    }
