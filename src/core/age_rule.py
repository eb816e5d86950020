"""Published-age rule (core domain)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Iterable, List, Optional

from core.models import FilterOption
from core.options import EXCLUDE_OLDER, values_for
from core.ports import DiagnosticSink

LOGGER = logging.getLogger(__name__)

# Tried after the RFC 822/1123 family; the first layout that parses wins.
ISO_LAYOUTS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",  # RFC 3339 with fractional seconds
    "%Y-%m-%dT%H:%M:%S%z",  # RFC 3339
)

MAX_THRESHOLD_DAYS = timedelta.max.days


def _parse_rfc2822(value: str) -> Optional[datetime]:
    # RFC 1123 and RFC 822, numeric or named (GMT, EST, PDT...) zones.
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


def _parse_iso(value: str) -> Optional[datetime]:
    for layout in ISO_LAYOUTS:
        try:
            return datetime.strptime(value, layout)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def parse_published(value: str) -> Optional[datetime]:
    """Parse a feed timestamp into an aware datetime, or None.

    Naive results (``-0000`` zones, zone-less ISO strings) are read as UTC.
    """

    value = value.strip()
    if not value:
        return None

    parsed = _parse_rfc2822(value) or _parse_iso(value)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_threshold(value: str) -> Optional[int]:
    """Return the age threshold in days, or None unless it is a plain non-negative integer."""

    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    days = int(value)
    if days > MAX_THRESHOLD_DAYS:
        return None
    return days


def _thresholds(options: Iterable[FilterOption], sink: DiagnosticSink) -> List[int]:
    thresholds: List[int] = []
    for raw in values_for(options, EXCLUDE_OLDER):
        days = parse_threshold(raw)
        if days is None:
            sink.warning(
                "Ignoring %s value %r: expected a number of days between 0 and %s",
                EXCLUDE_OLDER,
                raw,
                MAX_THRESHOLD_DAYS,
            )
            continue
        thresholds.append(days)
    return thresholds


def should_skip_older(
    options: Iterable[FilterOption],
    published: str,
    sink: Optional[DiagnosticSink] = None,
    now: Optional[datetime] = None,
) -> bool:
    """Return True when the item is older than an ``exclude-older`` threshold.

    Unparseable timestamps and invalid thresholds never cause a skip.
    """

    sink = sink or LOGGER
    thresholds = _thresholds(options, sink)
    if not thresholds:
        return False

    published_at = parse_published(published)
    if published_at is None:
        sink.warning("Unable to parse published date %r, not applying %s", published, EXCLUDE_OLDER)
        return False

    now = now or datetime.now(timezone.utc)
    age = now - published_at
    # Repeated values are OR'd, so the smallest threshold decides.
    limit = timedelta(days=min(thresholds))
    if age > limit:
        sink.debug("Skipping item published %s, older than %s days", published_at.isoformat(), min(thresholds))
        return True
    return False
