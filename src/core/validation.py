"""Validation helpers for feed options."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from core.age_rule import MAX_THRESHOLD_DAYS, parse_threshold
from core.models import FilterOption
from core.options import EXCLUDE_OLDER, KNOWN_OPTIONS, PATTERN_OPTIONS

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class OptionIssue:
    name: str
    value: str
    severity: str
    message: str


def validate_options(options: Iterable[FilterOption]) -> List[OptionIssue]:
    """Return problems found in ``options``, in declaration order."""

    issues: List[OptionIssue] = []
    for option in options:
        if option.name in PATTERN_OPTIONS:
            try:
                re.compile(option.value)
            except re.error as exc:
                issues.append(OptionIssue(option.name, option.value, ERROR, f"invalid pattern: {exc}"))
        elif option.name == EXCLUDE_OLDER:
            if parse_threshold(option.value) is None:
                message = f"must be a whole number of days between 0 and {MAX_THRESHOLD_DAYS}"
                issues.append(OptionIssue(option.name, option.value, ERROR, message))
        elif option.name not in KNOWN_OPTIONS:
            issues.append(OptionIssue(option.name, option.value, WARNING, "unknown option, ignored by filters"))
    return issues


def has_errors(issues: Iterable[OptionIssue]) -> bool:
    return any(issue.severity == ERROR for issue in issues)
