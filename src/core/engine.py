"""Item filter combining the text, category and age rules.

This module is integration-agnostic. The caller supplies the feed options,
the item fields and a diagnostic sink; nothing here fetches, stores or sends.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from core.age_rule import should_skip_older
from core.category_rules import should_skip_category
from core.models import FeedConfig, FilterDecision, FilterOption, ItemView
from core.ports import DiagnosticSink
from core.text_rules import should_skip_text

LOGGER = logging.getLogger(__name__)

TEXT = "text"
CATEGORY = "category"
AGE = "age"


def evaluate(
    options: Iterable[FilterOption],
    item: ItemView,
    sink: Optional[DiagnosticSink] = None,
) -> FilterDecision:
    """Run every rule family and record which of them voted to skip."""

    sink = sink or LOGGER
    options = list(options)

    reasons: List[str] = []
    # Families are independent; an item is dropped if any one of them says so.
    if should_skip_text(options, item.title, item.content, sink):
        reasons.append(TEXT)
    if should_skip_category(options, item.categories, sink):
        reasons.append(CATEGORY)
    if should_skip_older(options, item.published, sink):
        reasons.append(AGE)

    return FilterDecision(skip=bool(reasons), reasons=tuple(reasons))


def should_skip(
    options: Iterable[FilterOption],
    item: ItemView,
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """Return True when any rule family suppresses the item."""

    return evaluate(options, item, sink).skip


class ItemFilter:
    """Applies one feed's options to candidate items."""

    def __init__(self, feed: FeedConfig, sink: Optional[DiagnosticSink] = None) -> None:
        self._feed = feed
        self._sink = sink or LOGGER

    @property
    def feed(self) -> FeedConfig:
        return self._feed

    def decide(self, item: ItemView) -> FilterDecision:
        decision = evaluate(self._feed.options, item, self._sink)
        if decision.skip:
            self._sink.debug(
                "Skipping %r from %s (%s)", item.title, self._feed.url, ", ".join(decision.reasons)
            )
        return decision

    def keep(self, items: Iterable[ItemView]) -> List[ItemView]:
        """Return the items that survive filtering, preserving order."""

        return [item for item in items if not self.decide(item).skip]
