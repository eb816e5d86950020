"""Title and content include/exclude rules (core domain)."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from core.models import FilterOption
from core.options import EXCLUDE, EXCLUDE_TITLE, INCLUDE, INCLUDE_TITLE, values_for
from core.patterns import compile_patterns, first_match
from core.ports import DiagnosticSink

LOGGER = logging.getLogger(__name__)


def should_skip_text(
    options: Iterable[FilterOption],
    title: str,
    content: str,
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """Return True when the title/content rules suppress the item.

    Matching logic:
    - Any ``exclude`` pattern found in the content, or any ``exclude-title``
      pattern found in the title, skips the item.
    - When at least one ``include`` or ``include-title`` value exists, the item
      is kept only if one of those patterns matches its field.
    - With no text options at all, nothing is skipped.
    """

    sink = sink or LOGGER
    options = list(options)

    # Excludes are checked first so an explicit exclude always wins.
    excludes = compile_patterns(values_for(options, EXCLUDE), EXCLUDE, sink)
    hit = first_match(excludes, content)
    if hit is not None:
        sink.debug("Skipping item, content matches exclude pattern %r", hit)
        return True

    title_excludes = compile_patterns(values_for(options, EXCLUDE_TITLE), EXCLUDE_TITLE, sink)
    hit = first_match(title_excludes, title)
    if hit is not None:
        sink.debug("Skipping item, title matches exclude-title pattern %r", hit)
        return True

    raw_includes = values_for(options, INCLUDE)
    raw_title_includes = values_for(options, INCLUDE_TITLE)
    if not raw_includes and not raw_title_includes:
        return False

    # Invalid include patterns still count towards include mode being active.
    includes = compile_patterns(raw_includes, INCLUDE, sink)
    if first_match(includes, content) is not None:
        return False

    title_includes = compile_patterns(raw_title_includes, INCLUDE_TITLE, sink)
    if first_match(title_includes, title) is not None:
        return False

    sink.debug("Skipping item, nothing matched the include/include-title patterns")
    return True
