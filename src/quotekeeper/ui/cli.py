from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from quotekeeper.app import (
    add_quote,
    export_quotes_file,
    import_quotes_file,
    list_categories,
    show_last_quote,
    show_random_quote,
    sync_quotes,
    watch_quotes,
)
from quotekeeper.config import configure_logging
from quotekeeper.domain.errors import QuoteImportError
from quotekeeper.domain.quote_book import AddStatus

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage and synchronise quotes")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Show a random quote")
    show_mode = show.add_mutually_exclusive_group()
    show_mode.add_argument(
        "--category",
        type=str,
        help="Category to filter by and remember (use 'all' to clear the filter)",
    )
    show_mode.add_argument(
        "--last",
        action="store_true",
        help="Show the quote viewed last time instead of a random one",
    )

    subparsers.add_parser("categories", help="List known categories")

    add = subparsers.add_parser("add", help="Add a new quote")
    add.add_argument("--text", type=str, required=True, help="Quote text")
    add.add_argument("--category", type=str, required=True, help="Quote category")
    add.add_argument(
        "--offline",
        action="store_true",
        help="Store the quote locally without posting it to the server",
    )

    import_ = subparsers.add_parser("import", help="Import quotes from a JSON file")
    import_.add_argument("path", type=Path, help="JSON file holding an array of quotes")
    import_.add_argument(
        "--offline",
        action="store_true",
        help="Store imported quotes locally without posting them to the server",
    )

    export = subparsers.add_parser("export", help="Export quotes to a JSON file")
    export.add_argument("path", type=Path, help="Target file (or directory for quotes.json)")

    subparsers.add_parser("sync", help="Merge quotes from the server once")

    watch = subparsers.add_parser("watch", help="Periodically merge quotes from the server")
    watch.add_argument(
        "--interval",
        type=float,
        help="Seconds between syncs (defaults to config)",
    )
    watch.add_argument(
        "--cycles",
        type=int,
        help="Number of periodic syncs to run before stopping",
    )

    return parser.parse_args(list(argv))


def _validate_args(args: argparse.Namespace) -> None:
    if args.command != "watch":
        return
    if args.interval is not None and args.interval <= 0:
        raise ValueError("Interval must be positive")
    if args.cycles is not None and args.cycles < 1:
        raise ValueError("Cycles must be at least 1")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
    try:
        _validate_args(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "show" and parsed_args.last:
            show_last_quote()
        elif parsed_args.command == "show":
            show_random_quote(category=parsed_args.category)
        elif parsed_args.command == "categories":
            list_categories()
        elif parsed_args.command == "add":
            result = add_quote(
                text=parsed_args.text,
                category=parsed_args.category,
                submit=not parsed_args.offline,
            )
            if result.status is AddStatus.REJECTED:
                sys.exit(2)
        elif parsed_args.command == "import":
            import_quotes_file(parsed_args.path, submit=not parsed_args.offline)
        elif parsed_args.command == "export":
            export_quotes_file(parsed_args.path)
        elif parsed_args.command == "sync":
            sync_quotes()
        elif parsed_args.command == "watch":
            watch_quotes(interval_seconds=parsed_args.interval, max_cycles=parsed_args.cycles)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except QuoteImportError as exc:
        log.error(f"Failed to import quotes: {exc}")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
