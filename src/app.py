"""Application entry point for the inkcap editor."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from art import tprint

import settings
from adapters.scope_matcher import PatternScopeMatcher
from adapters.statistics import export_with_trailer, format_statistics_trailer
from core.config import LIMIT_TYPES, LimitConfig
from core.profiles import UnknownProfileError, available_profiles, select_profile

NAME = "INKCAP"
FONT = "tarty-1"

COMMANDS = {"edit", "stats", "export", "profiles"}


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

    # Console output would draw over the TUI, so it is off unless asked for.
    if config.get("console", False):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/inkcap.log")
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


def _resolve_limits(
    parser: argparse.ArgumentParser,
    profile: Optional[str],
    limit_type: Optional[str],
) -> LimitConfig:
    limits = settings.LIMITS
    if limit_type and limit_type != limits.limit_type:
        limits = replace(limits, limit_type=limit_type)
    if profile:
        try:
            limits = select_profile(limits, profile)
        except UnknownProfileError as exc:
            parser.error(str(exc))
    return limits


def _edit(path: Path, limits: LimitConfig) -> None:
    from frontend.app import EditorApp

    logger = logging.getLogger(__name__)
    logger.info("Opening %s", path)
    EditorApp(
        path=path,
        defaults=limits,
        scope=PatternScopeMatcher(limits.file_pattern),
        template=settings.TEMPLATE,
    ).run()


def _read(parser: argparse.ArgumentParser, path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot read {path}: {exc.strerror or exc}")


def _stats(parser: argparse.ArgumentParser, path: Path, limits: LimitConfig) -> None:
    _print_banner()
    print(path)
    print(format_statistics_trailer(_read(parser, path), limits))


def _export(parser: argparse.ArgumentParser, source: Path, destination: Path, limits: LimitConfig) -> None:
    content = export_with_trailer(_read(parser, source), limits)
    destination.write_text(content, encoding="utf-8")
    logging.getLogger(__name__).info("Exported %s to %s", source, destination)
    print(f"Exported {source} -> {destination}")


def _profiles(limits: LimitConfig) -> None:
    _print_banner()
    for name in available_profiles(limits):
        print(f"{name}: {limits.profiles[name]} chars")


def _add_limit_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument("--profile", help="Apply a character-limit profile")
    subparser.add_argument("--limit-type", choices=LIMIT_TYPES, help="Count characters or words")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inkcap")
    subparsers = parser.add_subparsers(dest="command")

    edit_parser = subparsers.add_parser("edit", help="Open a document in the limited editor")
    edit_parser.add_argument("path", type=Path)
    _add_limit_arguments(edit_parser)

    stats_parser = subparsers.add_parser("stats", help="Print size statistics for a document")
    stats_parser.add_argument("path", type=Path)
    _add_limit_arguments(stats_parser)

    export_parser = subparsers.add_parser("export", help="Copy a document with a statistics trailer")
    export_parser.add_argument("source", type=Path)
    export_parser.add_argument("destination", type=Path)
    _add_limit_arguments(export_parser)

    subparsers.add_parser("profiles", help="List configured profiles")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    # A bare path opens the editor, so "inkcap draft.txt" works.
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv = ["edit", *argv]

    args = parser.parse_args(argv)
    _configure_logging()

    if args.command is None:
        parser.print_help()
        return
    if args.command == "profiles":
        _profiles(settings.LIMITS)
        return

    limits = _resolve_limits(parser, args.profile, args.limit_type)
    if args.command == "stats":
        _stats(parser, args.path, limits)
        return
    if args.command == "export":
        _export(parser, args.source, args.destination, limits)
        return
    _edit(args.path, limits)


if __name__ == "__main__":
    main()
