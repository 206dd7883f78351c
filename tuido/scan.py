"""File discovery and marker-line scanning.

Runs once, before the interactive loop. An unlistable root is fatal; below it
discovery is best-effort and unlistable directories are skipped. Reading a
discovered file is fatal by default; callers may opt into skipping unreadable
files with a warning.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path

from .model import Item, is_task_line

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES: tuple[str, ...] = (".md", ".txt", ".xit")
PROJECT_NAME = "tuido"


class ScanError(OSError):
    """The scan root or a discovered file could not be read."""


def default_suffixes(root: Path) -> tuple[str, ...]:
    """Return default suffixes, adding ``.py`` when scanning tuido's own tree."""
    if root.name == PROJECT_NAME:
        return (*DEFAULT_SUFFIXES, ".py")
    return DEFAULT_SUFFIXES


def normalize_suffixes(suffixes: Iterable[str]) -> tuple[str, ...]:
    """Lowercase suffixes and give each a leading dot.

    Blanks and duplicates are dropped; order is kept. ``md`` and ``.md`` are
    the same suffix.
    """
    seen: list[str] = []
    for suffix in suffixes:
        cleaned = str(suffix).strip().lower().lstrip(".")
        if not cleaned:
            continue
        cleaned = f".{cleaned}"
        if cleaned not in seen:
            seen.append(cleaned)
    return tuple(seen)


def discover_files(root: Path, suffixes: Sequence[str], show_hidden: bool = False) -> list[Path]:
    """Return files under ``root`` whose lowercased path ends with a suffix.

    Traversal order is sorted by name at every level so results are stable.
    Dot-prefixed directories and files are skipped unless ``show_hidden``.
    """
    wanted = normalize_suffixes(suffixes)
    if not wanted:
        return []

    top = os.fspath(root)

    def on_error(exc: OSError) -> None:
        if exc.filename is not None and os.fspath(exc.filename) == top:
            raise ScanError(f"cannot read {root}: {exc.strerror or exc}") from exc
        logger.debug("skipping unreadable directory %s: %s", exc.filename, exc)

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        if not show_hidden:
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
        dirnames.sort()
        for name in sorted(filenames):
            if not show_hidden and name.startswith("."):
                continue
            path = Path(dirpath) / name
            if str(path).lower().endswith(wanted):
                found.append(path)
    return found


def read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 (BOM stripped), falling back to latin-1."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ScanError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def scan_lines(path: Path) -> list[tuple[int, str]]:
    """Return ``(line_number, text)`` for each marker line of ``path``."""
    text = read_text(path)
    return [
        (line_number, line)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if is_task_line(line)
    ]


def collect_items(paths: Iterable[Path], skip_unreadable: bool = False) -> list[Item]:
    """Scan ``paths`` in order and build one item per marker line.

    Raises ``ScanError`` on the first unreadable file unless
    ``skip_unreadable`` is set, in which case the file is logged and skipped.
    """
    items: list[Item] = []
    for path in paths:
        try:
            lines = scan_lines(path)
        except ScanError as exc:
            if not skip_unreadable:
                raise
            logger.warning("skipping %s", exc)
            continue
        items.extend(Item.create(str(path), line_number, text) for line_number, text in lines)
        if lines:
            logger.debug("%s: %d task line(s)", path, len(lines))
    return items


__all__ = [
    "DEFAULT_SUFFIXES",
    "ScanError",
    "collect_items",
    "default_suffixes",
    "discover_files",
    "normalize_suffixes",
    "read_text",
    "scan_lines",
]
