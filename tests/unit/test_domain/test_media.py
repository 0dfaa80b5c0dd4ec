"""Tests for media domain types."""

import pytest


def test_item_from_api(api_record):
    from chatmedia.domain.media import Item

    item = Item.from_api(api_record)

    assert item.id == "101"
    assert item.kind == "image"
    assert item.created_at == "2025-03-04T10:15:00Z"
    assert item.payload == {
        "content": "",
        "image_url": "https://cdn.example.com/chat/101.jpg",
    }
    assert item.sender_name == "Asha Rao"


def test_item_from_api_requires_id(api_record):
    from chatmedia.domain.media import Item

    del api_record["id"]

    with pytest.raises(KeyError):
        Item.from_api(api_record)


def test_item_url_prefers_media_urls():
    from chatmedia.domain.media import Item

    video = Item.from_api({
        "id": 1,
        "message_type": "video",
        "video_url": "https://cdn.example.com/v.mp4",
        "content": "see https://example.com",
    })

    assert video.url == "https://cdn.example.com/v.mp4"


def test_item_url_for_docs():
    from chatmedia.domain.media import Item

    audio = Item.from_api({"id": 2, "message_type": "audio", "audio_url": "https://cdn.example.com/a.m4a"})
    doc = Item.from_api({"id": 3, "message_type": "file", "file_url": "https://cdn.example.com/f.pdf"})

    assert audio.url == "https://cdn.example.com/a.m4a"
    assert doc.url == "https://cdn.example.com/f.pdf"


def test_item_url_extracted_from_link_text():
    from chatmedia.domain.media import Item

    link = Item.from_api({
        "id": 4,
        "message_type": "text",
        "content": "minutes are at https://docs.example.com/m/12 thanks",
    })
    plain = Item.from_api({"id": 5, "message_type": "text", "content": "no link here"})

    assert link.url == "https://docs.example.com/m/12"
    assert plain.url is None


def test_item_missing_sender():
    from chatmedia.domain.media import Item

    item = Item.from_api({"id": 6, "message_type": "file"})

    assert item.sender_name == ""
    assert item.content == ""


def test_item_immutable(api_record):
    from dataclasses import FrozenInstanceError

    from chatmedia.domain.media import Item

    item = Item.from_api(api_record)

    with pytest.raises(FrozenInstanceError):
        item.id = "other"


def test_page_result_empty():
    from chatmedia.domain.media import PageResult

    result = PageResult.empty()

    assert result.items == ()
    assert result.has_more is False


def test_feed_snapshot_is_independent(categories, api_record):
    from chatmedia.domain.media import CategoryFeed, Item

    feed = CategoryFeed(category=categories[0])
    feed.items.append(Item.from_api(api_record))

    snapshot = feed.snapshot()
    feed.items.append(Item.from_api({**api_record, "id": 102}))

    assert len(snapshot.items) == 1
    assert snapshot.category is feed.category
    assert snapshot.state == feed.state


def test_item_from_api_rejects_null_id(api_record):
    from chatmedia.domain.media import Item

    with pytest.raises(ValueError):
        Item.from_api({**api_record, "id": None})
