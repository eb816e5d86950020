"""Command line entry point for feedsieve."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console

import settings
from adapters.console_report import format_issue, render_report
from adapters.item_loader import load_items
from core.engine import ItemFilter
from core.models import FeedConfig
from core.validation import has_errors, validate_options

NAME = "FEEDSIEVE"
FONT = "tarty-1"

EXIT_OK = 0
EXIT_INVALID_OPTIONS = 1
EXIT_BAD_INPUT = 2

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_PATH = "logs/feedsieve.log"

# Handlers attached by configure_logging, replaced on every call.
_INSTALLED_HANDLERS: list[logging.Handler] = []


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _log_level(config: dict) -> int:
    level = logging.getLevelName(str(config.get("level", "INFO")).upper())
    return level if isinstance(level, int) else logging.INFO


def _file_handler(file_cfg: dict, base_dir: str) -> RotatingFileHandler:
    path = file_cfg.get("path", DEFAULT_LOG_PATH)
    if not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
        backupCount=int(file_cfg.get("backup_count", 5)),
        encoding="utf-8",
    )


def configure_logging(config: dict, base_dir: str) -> list[logging.Handler]:
    """Attach the console and rotating file handlers described by ``config``.

    Relative log paths are resolved against ``base_dir``, the directory of the
    config file. Returns the handlers now installed on the root logger.
    """

    root = logging.getLogger()
    for handler in _INSTALLED_HANDLERS:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED_HANDLERS.clear()

    if not config.get("enabled", False):
        return []

    level = _log_level(config)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers: list[logging.Handler] = []
    if config.get("console", True):
        handlers.append(logging.StreamHandler())
    file_cfg = config.get("file") or {}
    if not isinstance(file_cfg, dict):
        raise ValueError("'logging.file' must be an object")
    if file_cfg.get("enabled", False):
        handlers.append(_file_handler(file_cfg, base_dir))

    root.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    _INSTALLED_HANDLERS.extend(handlers)
    return handlers


def _load(config_path: Optional[str]) -> list[FeedConfig]:
    path = os.path.abspath(settings.resolve_config_path(config_path))
    base_dir = os.path.dirname(path)
    config = settings.load_config(path)
    configure_logging(settings.logging_config(config), base_dir)
    return settings.build_feeds(config, base_dir=base_dir)


def _check(args: argparse.Namespace, console: Console) -> int:
    feeds = _load(args.config)
    logger = logging.getLogger(__name__)

    if args.feed:
        feeds = [feed for feed in feeds if feed.url == args.feed]
        if not feeds:
            logger.error("Feed %s is not configured", args.feed)
            return EXIT_BAD_INPUT

    items = load_items(args.items)
    logger.info("%s feeds and %s items are loaded", len(feeds), len(items))

    for feed in feeds:
        item_filter = ItemFilter(feed, logging.getLogger("feedsieve.filter"))
        decisions = [item_filter.decide(item) for item in items]
        render_report(feed, items, decisions, console)
    return EXIT_OK


def _validate(args: argparse.Namespace, console: Console) -> int:
    feeds = _load(args.config)

    failed = False
    for feed in feeds:
        issues = validate_options(feed.options)
        if not issues:
            continue
        console.print(feed.url)
        for issue in issues:
            console.print(format_issue(issue))
        failed = failed or has_errors(issues)

    if failed:
        return EXIT_INVALID_OPTIONS
    console.print(f"{len(feeds)} feeds checked, no errors")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="feedsieve")
    parser.add_argument("--no-banner", action="store_true", help="Skip the startup banner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Show which items each feed would keep or skip")
    check.add_argument("--config", help="Path to config.json")
    check.add_argument("--items", required=True, help="JSON array of items to evaluate")
    check.add_argument("--feed", help="Only evaluate the feed with this URL")

    validate = subparsers.add_parser("validate", help="Report malformed or unknown feed options")
    validate.add_argument("--config", help="Path to config.json")
    return parser


def main(argv: Optional[list[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    if not args.no_banner:
        _print_banner()

    handlers = {"check": _check, "validate": _validate}
    try:
        return handlers[args.command](args, console)
    except (OSError, ValueError) as exc:
        # Missing files, malformed JSON and wrongly shaped config or items.
        logging.getLogger(__name__).error("%s", exc)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    raise SystemExit(main())
