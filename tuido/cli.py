"""Command-line front door for tuido.

Parses CLI options, layers them over persisted config, configures logging and
dispatches into the tracker runtime. Startup I/O failures end the process with
a message before any UI is drawn.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .logging_setup import setup_logging
from .runtime import run_tracker
from .runtime.app import TrackerOptions
from .runtime.config import (
    load_context_lines,
    load_extensions,
    load_show_hidden,
    load_style_name,
    load_theme_name,
    save_theme_name,
)
from .scan import ScanError, default_suffixes, normalize_suffixes
from .source_context import MAX_CONTEXT_LINES
from .ui_theme import available_theme_names


def _suffix(value: str) -> str:
    """argparse type for file suffixes; ``md`` and ``.md`` are equivalent."""
    cleaned = value.strip()
    if not cleaned:
        raise argparse.ArgumentTypeError("suffix must not be empty")
    return cleaned if cleaned.startswith(".") else f".{cleaned}"


def _context_lines(value: str) -> int:
    """argparse type for the context strip height."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0 or parsed > MAX_CONTEXT_LINES:
        raise argparse.ArgumentTypeError(f"value must be between 0 and {MAX_CONTEXT_LINES}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tuido",
        description="Track [ ] task lines found in text files under a directory.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "--ext",
        action="append",
        type=_suffix,
        default=None,
        metavar="SUFFIX",
        help="File suffix to scan (repeatable). Defaults to .md, .txt and .xit.",
    )
    parser.add_argument("--theme", choices=available_theme_names(), default=None, help="UI theme (remembered).")
    parser.add_argument("--style", default=None, help="Pygments style for the source context strip.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--list", action="store_true", help="Print open tasks and exit.")
    parser.add_argument("--hidden", action="store_true", help="Also scan dot-directories and dot-files.")
    parser.add_argument(
        "--skip-unreadable",
        action="store_true",
        help="Warn about and skip files that cannot be read instead of aborting.",
    )
    parser.add_argument(
        "--context-lines",
        type=_context_lines,
        default=None,
        metavar="N",
        help=f"Source lines shown around the selected task (0-{MAX_CONTEXT_LINES}, 0 hides).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for tag colors (random per run by default).")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at debug level.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch tuido on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args()
    setup_logging(args.log_file, logging.DEBUG if args.debug else logging.INFO)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path or default_path)
    if not root.exists():
        raise SystemExit(f"Path not found: {root}")
    if not root.is_dir():
        raise SystemExit(f"Not a directory: {root}")
    root = root.resolve()

    if args.theme is not None:
        save_theme_name(args.theme)

    suffixes = normalize_suffixes(args.ext or ()) or load_extensions() or default_suffixes(root)
    options = TrackerOptions(
        suffixes=suffixes,
        show_hidden=args.hidden or load_show_hidden(),
        skip_unreadable=args.skip_unreadable,
        theme_name=args.theme or load_theme_name(),
        no_color=args.no_color,
        style=args.style or load_style_name(),
        context_lines=args.context_lines if args.context_lines is not None else load_context_lines(),
        list_only=args.list,
        seed=args.seed,
    )
    try:
        run_tracker(root, options)
    except ScanError as exc:
        raise SystemExit(f"tuido: {exc}") from exc


if __name__ == "__main__":
    main()
