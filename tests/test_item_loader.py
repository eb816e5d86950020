from __future__ import annotations

import json

import pytest

from adapters.item_loader import item_from_dict, load_items


def test_item_from_dict_defaults() -> None:
    item = item_from_dict({"title": "Hello"})
    assert item.title == "Hello"
    assert item.content == ""
    assert item.categories == ()
    assert item.published == ""


def test_single_string_category() -> None:
    assert item_from_dict({"categories": "Tech"}).categories == ("Tech",)


def test_load_items(tmp_path) -> None:
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps(
            [
                {
                    "title": "I like Cake!",
                    "content": "<p>Food is good.</p>",
                    "categories": ["Food", "Baking"],
                    "published": "Tue, 09 Jan 2024 12:00:00 +0000",
                }
            ]
        ),
        encoding="utf-8",
    )
    items = load_items(str(path))

    assert len(items) == 1
    assert items[0].categories == ("Food", "Baking")
    assert items[0].published == "Tue, 09 Jan 2024 12:00:00 +0000"


def test_load_items_rejects_non_arrays(tmp_path) -> None:
    path = tmp_path / "items.json"
    path.write_text(json.dumps({"title": "x"}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_items(str(path))

    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_items(str(path))


def test_wrongly_typed_fields_are_rejected(tmp_path) -> None:
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"title": "ok"}, {"title": "t", "categories": 5}]), encoding="utf-8")
    with pytest.raises(ValueError, match="item 1: Item field 'categories'"):
        load_items(str(path))

    with pytest.raises(ValueError, match="'title'"):
        item_from_dict({"title": {"text": "nested"}})
    with pytest.raises(ValueError, match="'categories'"):
        item_from_dict({"categories": ["Tech", {"name": "Go"}]})


def test_numeric_fields_become_text() -> None:
    item = item_from_dict({"title": 42, "categories": [2024, "News"]})
    assert item.title == "42"
    assert item.categories == ("2024", "News")
