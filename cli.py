#!/usr/bin/env python3
"""
CLI runner for mapping diffs.

Provides command-line interface for:
- Showing the differences between two JSON documents
- Checking whether two JSON documents differ

Usage:
    python cli.py diff old.json new.json                  # Show differences
    python cli.py diff old.json new.json --format json    # Differences as JSON
    python cli.py check old.json new.json                 # Exit status only
    python cli.py diff old.json new.json --no-freeze      # Compare as loaded

Exit status is 0 when the documents are the same, 1 when they differ and
2 when a document cannot be loaded.
"""

import argparse
import json
import logging
import sys
from collections.abc import Mapping, Set
from pathlib import Path
from typing import Optional

import structlog

from config import settings

# Configure logging before imports
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.dev.ConsoleRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    ),
    logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
)

logger = structlog.get_logger()

from diffing.engine import DiffEngine
from diffing.loader import DocumentError, load_document
from values.freezer import to_value

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def build_engine(old_path: Path, new_path: Path, freeze: bool) -> DiffEngine:
    """
    Load both documents and build a diff engine over them.

    Args:
        old_path: Path to the previous document
        new_path: Path to the current document
        freeze: Convert documents to value views before comparing

    Returns:
        DiffEngine for the two documents

    Raises:
        DocumentError: If either document cannot be loaded
    """
    old = load_document(old_path, settings.DOCUMENT_ENCODING)
    new = load_document(new_path, settings.DOCUMENT_ENCODING)

    if freeze:
        old = to_value(old)
        new = to_value(new)

    return DiffEngine(old, new)


def _plain(obj):
    # Value views back to JSON-compatible types
    if isinstance(obj, Mapping):
        return {key: _plain(value) for key, value in obj.items()}
    if isinstance(obj, (tuple, list, Set)):
        return [_plain(item) for item in obj]
    return obj


def cmd_diff(old_path: Path, new_path: Path, output_format: str, freeze: bool) -> int:
    """Print the differences between two documents."""
    try:
        engine = build_engine(old_path, new_path, freeze)
    except DocumentError as e:
        logger.error("Failed to load document", path=str(e.path), reason=e.reason)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if output_format == "json":
        records = [_plain(difference.to_dict()) for difference in engine.differences()]
        print(json.dumps(records, indent=2))
    elif engine.has_differences():
        print(engine.render())

    logger.info(
        "Diff complete",
        old=str(old_path),
        new=str(new_path),
        differences=len(engine.differences())
    )

    return EXIT_DIFFERENT if engine.has_differences() else EXIT_SAME


def cmd_check(old_path: Path, new_path: Path, freeze: bool) -> int:
    """Report through the exit status whether two documents differ."""
    try:
        engine = build_engine(old_path, new_path, freeze)
    except DocumentError as e:
        logger.error("Failed to load document", path=str(e.path), reason=e.reason)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    different = engine.has_differences()
    logger.info("Check complete", old=str(old_path), new=str(new_path), different=different)

    return EXIT_DIFFERENT if different else EXIT_SAME


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description=f"{settings.APP_NAME} - compare two JSON objects key by key",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  diff      Show differences between OLD and NEW
  check     Only set the exit status (0 same, 1 different, 2 error)

Examples:
  python cli.py diff old.json new.json
  python cli.py diff old.json new.json --format json
  python cli.py check old.json new.json
        """
    )

    parser.add_argument(
        "command",
        choices=["diff", "check"],
        help="Command to execute"
    )

    parser.add_argument("old", type=Path, help="Previous JSON document")
    parser.add_argument("new", type=Path, help="Current JSON document")

    parser.add_argument(
        "--format",
        dest="output_format",
        choices=list(settings.OUTPUT_FORMATS),
        default=settings.OUTPUT_FORMAT,
        help="Output format for 'diff' (default: %(default)s)"
    )

    parser.add_argument(
        "--freeze",
        dest="freeze",
        action=argparse.BooleanOptionalAction,
        default=settings.FREEZE_VALUES,
        help="Compare documents as value views, or as loaded with --no-freeze; "
             "defaults to FREEZE_VALUES"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{settings.APP_NAME} {settings.APP_VERSION}"
    )

    args = parser.parse_args(argv)

    for issue in settings.validate():
        logger.warning(f"Configuration issue: {issue}")

    if args.command == "diff":
        return cmd_diff(args.old, args.new, args.output_format, args.freeze)
    elif args.command == "check":
        return cmd_check(args.old, args.new, args.freeze)

    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
