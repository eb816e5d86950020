"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any feed-parsing or configuration format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class FilterOption:
    """A single named option attached to a feed."""

    name: str
    value: str


@dataclass(frozen=True)
class FeedConfig:
    """A feed and its ordered options. Names may repeat."""

    url: str
    options: Tuple[FilterOption, ...] = ()


@dataclass(frozen=True)
class ItemView:
    """Minimal item facts used by the filtering rules."""

    title: str
    content: str
    categories: Tuple[str, ...] = ()
    published: str = ""


@dataclass(frozen=True)
class FilterDecision:
    """Outcome of filtering one item; reasons name the rules that voted to skip."""

    skip: bool
    reasons: Tuple[str, ...] = field(default_factory=tuple)
