from __future__ import annotations

from core.category_rules import should_skip_category
from core.models import FilterOption


class RecordingSink:
    def __init__(self) -> None:
        self.warnings: list[str] = []

    def debug(self, msg: str, *args) -> None:
        pass

    def warning(self, msg: str, *args) -> None:
        self.warnings.append(msg % args)


def test_exclude_category() -> None:
    options = [FilterOption("exclude-category", "(?i)sports")]
    sink = RecordingSink()

    assert should_skip_category(options, ["News", "Sports", "Entertainment"], sink)
    assert not should_skip_category(options, ["News", "Entertainment"], sink)
    assert not should_skip_category(options, [], sink)


def test_no_category_options_never_skip() -> None:
    assert not should_skip_category([], ["Sports", "News"], RecordingSink())
    assert not should_skip_category([FilterOption("exclude", "Sports")], ["Sports"], RecordingSink())


def test_include_category() -> None:
    options = [FilterOption("include-category", "(?i)tech")]
    sink = RecordingSink()

    assert not should_skip_category(options, ["Technology", "News"], sink)
    assert should_skip_category(options, ["Sports", "Entertainment"], sink)


def test_include_category_skips_items_without_categories() -> None:
    options = [FilterOption("include-category", "(?i)tech")]
    assert should_skip_category(options, [], RecordingSink())


def test_multiple_include_categories_are_ored() -> None:
    options = [
        FilterOption("include-category", "(?i)tech"),
        FilterOption("include-category", "(?i)programming"),
    ]
    sink = RecordingSink()

    assert not should_skip_category(options, ["Programming"], sink)
    assert not should_skip_category(options, ["Technology"], sink)
    assert should_skip_category(options, ["Sports", "Entertainment"], sink)


def test_exclude_category_wins_over_include() -> None:
    options = [
        FilterOption("include-category", "(?i)tech"),
        FilterOption("exclude-category", "(?i)gadgets"),
    ]
    assert should_skip_category(options, ["Tech", "Gadgets"], RecordingSink())


def test_invalid_category_patterns() -> None:
    sink = RecordingSink()
    assert not should_skip_category([FilterOption("exclude-category", "[invalid")], ["Sports"], sink)
    assert sink.warnings

    sink = RecordingSink()
    assert should_skip_category([FilterOption("include-category", "[invalid")], ["Sports"], sink)
    assert should_skip_category([FilterOption("include-category", "[invalid")], ["[invalid"], sink)
    assert sink.warnings
