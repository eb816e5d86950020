"""Plain-text feed list parser.

The format is one feed URL per unindented line, followed by indented
``- name: value`` lines holding that feed's options::

    # comments and blank lines are ignored
    https://example.com/index.rss
     - exclude-title: (?i)sponsored
     - include-category: tech
"""

from __future__ import annotations

from typing import List, Optional

from core.models import FeedConfig, FilterOption


class FeedListError(ValueError):
    """Raised when a feed list line cannot be parsed."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def _parse_option(line_number: int, stripped: str) -> FilterOption:
    if not stripped.startswith("-"):
        raise FeedListError(line_number, f"expected '- name: value', got {stripped!r}")
    name, sep, value = stripped[1:].partition(":")
    name = name.strip()
    if not sep or not name:
        raise FeedListError(line_number, f"expected '- name: value', got {stripped!r}")
    return FilterOption(name=name, value=value.strip())


def parse_feed_list(text: str) -> List[FeedConfig]:
    """Parse feed list text into feed configs, keeping option order."""

    feeds: List[FeedConfig] = []
    url: Optional[str] = None
    options: List[FilterOption] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if line[0] in " \t":
            if url is None:
                raise FeedListError(line_number, "option appears before any feed URL")
            options.append(_parse_option(line_number, stripped))
            continue

        if url is not None:
            feeds.append(FeedConfig(url=url, options=tuple(options)))
        url = stripped
        options = []

    if url is not None:
        feeds.append(FeedConfig(url=url, options=tuple(options)))
    return feeds
