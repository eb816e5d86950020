"""Load candidate items from a JSON document."""

from __future__ import annotations

import json
from typing import Any, List

from core.models import ItemView

_SCALARS = (str, int, float)


def _text(entry: dict, field: str) -> str:
    raw = entry.get(field)
    if raw is None:
        return ""
    if not isinstance(raw, _SCALARS):
        raise ValueError(f"Item field '{field}' must be a string, got {type(raw).__name__}")
    return str(raw)


def _categories(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, list) or not all(isinstance(entry, _SCALARS) for entry in raw):
        raise ValueError("Item field 'categories' must be a string or a list of strings")
    return tuple(str(entry) for entry in raw)


def item_from_dict(entry: dict) -> ItemView:
    """Build an ItemView, defaulting missing fields to empty values.

    Raises ValueError when a field holds an object or list where text is expected.
    """

    return ItemView(
        title=_text(entry, "title"),
        content=_text(entry, "content"),
        categories=_categories(entry.get("categories")),
        published=_text(entry, "published"),
    )


def load_items(path: str) -> List[ItemView]:
    """Read a JSON array of item objects from ``path``."""

    with open(path, "r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid items file {path}: {exc}") from exc

    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise ValueError(f"Items file {path} must contain a JSON array of objects")

    items: List[ItemView] = []
    for index, entry in enumerate(data):
        try:
            items.append(item_from_dict(entry))
        except ValueError as exc:
            raise ValueError(f"Items file {path}, item {index}: {exc}") from exc
    return items
