"""Option names and lookup helpers (core domain)."""

from __future__ import annotations

from typing import Iterable, List

from core.models import FilterOption

EXCLUDE = "exclude"
EXCLUDE_TITLE = "exclude-title"
INCLUDE = "include"
INCLUDE_TITLE = "include-title"
EXCLUDE_CATEGORY = "exclude-category"
INCLUDE_CATEGORY = "include-category"
EXCLUDE_OLDER = "exclude-older"

PATTERN_OPTIONS = frozenset(
    {EXCLUDE, EXCLUDE_TITLE, INCLUDE, INCLUDE_TITLE, EXCLUDE_CATEGORY, INCLUDE_CATEGORY}
)
KNOWN_OPTIONS = PATTERN_OPTIONS | {EXCLUDE_OLDER}


def values_for(options: Iterable[FilterOption], name: str) -> List[str]:
    """Return every value configured under ``name``, in declaration order."""

    return [option.value for option in options if option.name == name]
