"""Console rendering of filter decisions.

Keeping formatting here lets the CLI stay a thin wiring layer and keeps the
core free of any presentation concerns.
"""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.text import Text

from core.models import FeedConfig, FilterDecision, ItemView
from core.validation import ERROR, OptionIssue

TITLE_CHARS = 72


def _clip(value: str) -> str:
    value = " ".join(value.split())
    if len(value) <= TITLE_CHARS:
        return value
    return value[: TITLE_CHARS - 1] + "…"


def format_decision(item: ItemView, decision: FilterDecision) -> Text:
    """Return a single styled line describing one decision."""

    line = Text()
    if decision.skip:
        line.append("skip ", style="bold red")
    else:
        line.append("keep ", style="bold green")
    line.append(_clip(item.title) or "(untitled)")
    if decision.reasons:
        line.append(f"  [{', '.join(decision.reasons)}]", style="dim")
    return line


def render_report(
    feed: FeedConfig,
    items: Sequence[ItemView],
    decisions: Sequence[FilterDecision],
    console: Console,
) -> None:
    """Print every decision for ``feed`` followed by a summary line."""

    console.print(Text(feed.url, style="bold"))
    for item, decision in zip(items, decisions):
        console.print(format_decision(item, decision))
    skipped = sum(1 for decision in decisions if decision.skip)
    console.print(Text(f"{len(decisions) - skipped} kept, {skipped} skipped", style="italic"))


def format_issue(issue: OptionIssue) -> Text:
    style = "red" if issue.severity == ERROR else "yellow"
    line = Text()
    line.append(f"{issue.severity:<8}", style=style)
    line.append(f"{issue.name}: {issue.value!r} ")
    line.append(issue.message, style="dim")
    return line
