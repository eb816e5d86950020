"""Configuration loading for feedsieve.

Feeds, their filter options and logging settings live in a single JSON file
so users can edit filters without touching Python. Feeds may also come from a
plain-text feed list referenced by that file.
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional

from dotenv import load_dotenv

from adapters.feed_list import parse_feed_list
from core.models import FeedConfig, FilterOption

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Default config location; FEEDSIEVE_CONFIG (environment or .env) overrides it.
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")
CONFIG_ENV_VAR = "FEEDSIEVE_CONFIG"


def resolve_config_path(path: Optional[str] = None) -> str:
    """Return the explicit path, else the environment override, else the default."""

    if path:
        return path
    load_dotenv()
    return os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def load_config(path: Optional[str] = None) -> dict:
    """Load the JSON config file."""

    path = resolve_config_path(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        try:
            config = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    return config


def _require_objects(raw: Any, label: str) -> list[dict]:
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(entry, dict) for entry in raw):
        raise ValueError(f"'{label}' must be a list of objects")
    return raw


def _normalize_options(raw_options: Any, url: str) -> tuple[FilterOption, ...]:
    options: list[FilterOption] = []
    for entry in _require_objects(raw_options, f"options of {url}"):
        name = entry.get("name")
        if not name:
            continue
        options.append(FilterOption(name=str(name), value=str(entry.get("value", ""))))
    return tuple(options)


def _normalize_feeds(raw_feeds: Any) -> list[FeedConfig]:
    feeds: list[FeedConfig] = []
    for entry in _require_objects(raw_feeds, "feeds"):
        url = entry.get("url")
        if not url:
            continue
        if not entry.get("enabled", True):
            continue
        feeds.append(FeedConfig(url=str(url), options=_normalize_options(entry.get("options"), url)))
    return feeds


def build_feeds(config: dict, base_dir: Optional[str] = None) -> list[FeedConfig]:
    """Return enabled feeds from ``feeds`` plus any from the ``feed_list`` file.

    A relative ``feed_list`` path is resolved against ``base_dir`` (usually the
    directory holding the config file). Raises ValueError when a section has
    the wrong shape.
    """

    feeds = _normalize_feeds(config.get("feeds"))

    feed_list = config.get("feed_list")
    if feed_list:
        if not isinstance(feed_list, str):
            raise ValueError("'feed_list' must be a file path")
        if not os.path.isabs(feed_list):
            feed_list = os.path.join(base_dir or PROJECT_ROOT, feed_list)
        with open(feed_list, "r", encoding="utf-8") as handle:
            feeds.extend(parse_feed_list(handle.read()))
    return feeds


def logging_config(config: dict) -> dict:
    """Return the optional logging section."""

    section = config.get("logging") or {}
    if not isinstance(section, dict):
        raise ValueError("'logging' must be an object")
    return section
