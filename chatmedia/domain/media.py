"""Domain types for the media / links / docs browser."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from chatmedia.utils.formatting import extract_url, format_sender_name


@dataclass(frozen=True)
class Category:
    id: str
    display_label: str
    server_query_type: str
    empty_text: str = ""


@dataclass(frozen=True)
class Item:
    """A single shared message (image, video, link, file, audio...).

    Items are never mutated once built; feeds only ever append them.
    """

    id: str
    kind: str
    payload: Mapping[str, Any]
    created_at: str
    sender_ref: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "Item":
        """Build an item from a getChatMedia record.

        Raises:
            KeyError: if the record has no id
            ValueError: if the id is null
        """
        if record["id"] is None:
            raise ValueError("media record has a null id")
        payload = {
            key: record.get(key)
            for key in ("content", "image_url", "video_url", "file_url", "audio_url")
            if record.get(key) is not None
        }
        return cls(
            id=str(record["id"]),
            kind=record.get("message_type") or "",
            payload=payload,
            created_at=record.get("created_at") or "",
            sender_ref=dict(record.get("sender") or {}),
        )

    @property
    def content(self) -> str:
        return self.payload.get("content") or ""

    @property
    def url(self) -> Optional[str]:
        """URL the item opens: the media or file URL, or the first link in its text."""
        for key in ("image_url", "video_url", "file_url", "audio_url"):
            if self.payload.get(key):
                return self.payload[key]
        return extract_url(self.content)

    @property
    def sender_name(self) -> str:
        return format_sender_name(
            self.sender_ref.get("first_name"), self.sender_ref.get("last_name")
        )


@dataclass(frozen=True)
class PageResult:
    items: Tuple[Item, ...] = ()
    has_more: bool = False

    @classmethod
    def empty(cls) -> "PageResult":
        return cls(items=(), has_more=False)


@dataclass(frozen=True)
class PaginationState:
    page: int = 0
    has_more: bool = True
    is_loading_more: bool = False


@dataclass
class CategoryFeed:
    category: Category
    items: List[Item] = field(default_factory=list)
    state: PaginationState = field(default_factory=PaginationState)

    def snapshot(self) -> "CategoryFeed":
        """Copy safe to hand to a renderer; later appends do not show up in it."""
        return CategoryFeed(
            category=self.category, items=list(self.items), state=self.state
        )
