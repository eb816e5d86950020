"""Ports (interfaces) used by the core rules.

The rules never reach for a process-wide logger on their own; callers pass a
sink in, and any ``logging.Logger`` satisfies this contract.
"""

from __future__ import annotations

from typing import Any, Protocol


class DiagnosticSink(Protocol):
    """Leveled diagnostics written while evaluating rules."""

    def debug(self, msg: str, *args: Any) -> None:
        ...

    def warning(self, msg: str, *args: Any) -> None:
        ...
