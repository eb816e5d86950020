from __future__ import annotations

import io

from rich.console import Console

from adapters.console_report import format_decision, format_issue, render_report
from core.models import FeedConfig, FilterDecision, ItemView
from core.validation import ERROR, OptionIssue


def _console() -> Console:
    return Console(file=io.StringIO(), record=True, width=120)


def test_format_decision_lines() -> None:
    item = ItemView(title="I like   cake", content="")

    kept = format_decision(item, FilterDecision(skip=False))
    assert kept.plain == "keep I like cake"

    skipped = format_decision(item, FilterDecision(skip=True, reasons=("text", "age")))
    assert skipped.plain == "skip I like cake  [text, age]"


def test_format_decision_clips_long_titles() -> None:
    line = format_decision(ItemView(title="x" * 200, content=""), FilterDecision(skip=False))
    assert line.plain.endswith("…")
    assert len(line.plain) < 100


def test_render_report_summary() -> None:
    console = _console()
    feed = FeedConfig(url="https://example.com/feed")
    items = [ItemView(title="one", content=""), ItemView(title="two", content="")]
    decisions = [FilterDecision(skip=False), FilterDecision(skip=True, reasons=("category",))]

    render_report(feed, items, decisions, console)
    output = console.export_text()

    assert "https://example.com/feed" in output
    assert "skip two  [category]" in output
    assert "1 kept, 1 skipped" in output


def test_format_issue() -> None:
    issue = OptionIssue("exclude", "[bad", ERROR, "invalid pattern")
    assert "exclude: '[bad'" in format_issue(issue).plain
