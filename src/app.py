"""Application entry point for the silencecrew filter."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

from art import tprint
from rich.console import Console

import settings
from adapters.decision_formatting import format_decision
from adapters.event_mapper import parse_event_line
from adapters.json_config import JsonConfigSource
from adapters.replay_display import ReplayDisplay
from core.models import Ownership
from core.ownership import AlwaysOwnCrewResolver
from core.policy import evaluate
from core.processor import CrewFilterProcessor
from core.text import normalize_text

NAME = "SILENCE CREW"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/silencecrew.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _report_config_error() -> None:
    if settings.CONFIG_ERROR:
        logging.getLogger(__name__).warning("Ignoring startup settings, %s", settings.CONFIG_ERROR)


def replay_events(lines: Iterable[str], processor: CrewFilterProcessor, display: ReplayDisplay) -> int:
    """Feed JSONL event lines through the processor; returns the event count."""

    logger = logging.getLogger(__name__)
    events = 0
    for number, line in enumerate(lines, start=1):
        # One bad record must not stop the replay, same as a live host.
        try:
            event = parse_event_line(line)
        except (json.JSONDecodeError, ValueError) as exc:
            logger.warning("Skipping line %s: %s", number, exc)
            continue
        if event is None:
            continue

        events += 1
        try:
            decision = processor.handle(event)
        except Exception:
            logger.exception("Error while processing event on line %s", number)
            continue
        display.render(event, decision)
    return events


def _run(source: str) -> None:
    _print_banner()
    _configure_logging()
    _report_config_error()
    logger = logging.getLogger(__name__)

    logger.info("Starting silencecrew replay from %s", source)

    config_source = JsonConfigSource(settings.CONFIG_PATH)
    display = ReplayDisplay(show_hidden=settings.REPLAY_SHOW_HIDDEN)
    # Ownership cannot be read from host events yet; see AlwaysOwnCrewResolver.
    processor = CrewFilterProcessor(
        config_provider=config_source,
        display=display,
        ownership_resolver=AlwaysOwnCrewResolver(),
    )

    if source == "-":
        events = replay_events(sys.stdin, processor, display)
    else:
        with open(source, "r", encoding="utf-8") as handle:
            events = replay_events(handle, processor, display)

    logger.info(
        "Replay complete: events=%s, hidden=%s, shown=%s",
        events,
        len(display.hidden),
        display.shown,
    )


def _classify(message: str, others: bool) -> None:
    _configure_logging()
    _report_config_error()
    config = JsonConfigSource(settings.CONFIG_PATH).current()
    ownership = Ownership.OTHERS_CREW if others else Ownership.OWN_CREW
    decision = evaluate(normalize_text(message), ownership, config)
    Console(highlight=False).print(format_decision(decision, mode="rich"))


def _setup() -> None:
    _print_banner()
    from frontend.app import ConfigPanelApp

    ConfigPanelApp().run()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="silencecrew")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Replay a JSONL event log through the filter")
    run_parser.add_argument("events", nargs="?", default="-", help="Event log path, or - for stdin")

    classify_parser = subparsers.add_parser("classify", help="Show the decision for one message")
    classify_parser.add_argument("message", help="Crewmate message text")
    classify_parser.add_argument(
        "--others",
        action="store_true",
        help="Use the Others' Crew switches instead of Your Crew",
    )

    subparsers.add_parser("config", help="Launch the config TUI")

    args = parser.parse_args(argv)
    if args.command == "config":
        _setup()
        return
    if args.command == "classify":
        _classify(args.message, args.others)
        return
    if args.command == "run":
        _run(args.events)
        return
    parser.print_help()


if __name__ == "__main__":
    main()
