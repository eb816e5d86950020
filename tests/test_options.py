from __future__ import annotations

from core.models import FilterOption
from core.options import INCLUDE_CATEGORY, values_for


def test_values_for_preserves_declaration_order() -> None:
    options = [
        FilterOption("include-category", "(?i)tech"),
        FilterOption("exclude", "foo"),
        FilterOption("include-category", "(?i)programming"),
    ]
    assert values_for(options, INCLUDE_CATEGORY) == ["(?i)tech", "(?i)programming"]


def test_values_for_missing_name_is_empty() -> None:
    assert values_for([FilterOption("exclude", "foo")], "include") == []
    assert values_for([], "exclude") == []


def test_values_for_is_case_sensitive() -> None:
    options = [FilterOption("Exclude", "foo"), FilterOption("exclude ", "bar")]
    assert values_for(options, "exclude") == []
