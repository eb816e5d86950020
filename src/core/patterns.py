"""Pattern compilation shared by the text and category rules."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from core.ports import DiagnosticSink

LOGGER = logging.getLogger(__name__)


def compile_pattern(
    pattern: str, option_name: str, sink: Optional[DiagnosticSink] = None
) -> Optional[re.Pattern]:
    """Compile ``pattern`` or return None after logging a warning.

    A pattern that fails to compile can never match, so callers treat None as
    a permanent non-match for both exclude and include options.
    """

    sink = sink or LOGGER
    try:
        return re.compile(pattern)
    except re.error as exc:
        sink.warning("Invalid %s pattern %r: %s", option_name, pattern, exc)
        return None


def compile_patterns(
    patterns: Iterable[str], option_name: str, sink: Optional[DiagnosticSink] = None
) -> List[re.Pattern]:
    """Compile every pattern, dropping the ones that fail."""

    compiled: List[re.Pattern] = []
    for pattern in patterns:
        regex = compile_pattern(pattern, option_name, sink)
        if regex is not None:
            compiled.append(regex)
    return compiled


def first_match(patterns: Iterable[re.Pattern], text: str) -> Optional[str]:
    """Return the source of the first pattern found anywhere in ``text``."""

    for regex in patterns:
        if regex.search(text):
            return regex.pattern
    return None
