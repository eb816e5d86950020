"""Category include/exclude rules (core domain)."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Sequence

from core.models import FilterOption
from core.options import EXCLUDE_CATEGORY, INCLUDE_CATEGORY, values_for
from core.patterns import compile_patterns
from core.ports import DiagnosticSink

LOGGER = logging.getLogger(__name__)


def _matching_category(patterns: List[re.Pattern], categories: Sequence[str]) -> Optional[str]:
    for regex in patterns:
        for category in categories:
            if regex.search(category):
                return category
    return None


def should_skip_category(
    options: Iterable[FilterOption],
    categories: Sequence[str],
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """Return True when the category rules suppress the item.

    An ``exclude-category`` match on any category skips. When any
    ``include-category`` value is set, at least one category must match one
    of them, so an item without categories is skipped in that mode.
    """

    sink = sink or LOGGER
    options = list(options)
    categories = list(categories)

    excludes = compile_patterns(values_for(options, EXCLUDE_CATEGORY), EXCLUDE_CATEGORY, sink)
    hit = _matching_category(excludes, categories)
    if hit is not None:
        sink.debug("Skipping item, category %r matches exclude-category", hit)
        return True

    raw_includes = values_for(options, INCLUDE_CATEGORY)
    if not raw_includes:
        return False

    includes = compile_patterns(raw_includes, INCLUDE_CATEGORY, sink)
    if _matching_category(includes, categories) is not None:
        return False

    sink.debug("Skipping item, no category in %r matches include-category", categories)
    return True
