"""Syntax-highlighted source lines around the selected task.

File contents are cached per path for the session since sources are read-only
inputs. Highlighting goes through Pygments with a lexer picked from the file
name; unknown file types fall back to plain text.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .model import Item
from .scan import ScanError, read_text

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "monokai"
MAX_CONTEXT_LINES = 20

_FORMATTERS: dict[str, Terminal256Formatter] = {}


@lru_cache(maxsize=64)
def file_lines(path: str) -> tuple[str, ...]:
    """Return the lines of ``path``, or nothing if it is no longer readable."""
    try:
        return tuple(read_text(Path(path)).splitlines())
    except ScanError as exc:
        logger.debug("context unavailable: %s", exc)
        return ()


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def context_window(line_number: int, total_lines: int, height: int) -> tuple[int, int]:
    """Return the 1-based inclusive line range of ``height`` rows around a line.

    The target line sits in the middle when the file allows it; the window is
    shifted inward at the start and end of the file.
    """
    if total_lines <= 0 or height <= 0:
        return 1, 0
    height = min(height, total_lines)
    start = max(1, line_number - (height - 1) // 2)
    end = start + height - 1
    if end > total_lines:
        end = total_lines
        start = max(1, end - height + 1)
    return start, end


def highlight_lines(lines: list[str], path: str, style: str = DEFAULT_STYLE) -> list[str]:
    """Highlight ``lines`` as a snippet of ``path`` and return one string per line."""
    if not lines:
        return []
    code = "\n".join(lines) + "\n"
    try:
        lexer = get_lexer_for_filename(Path(path).name, code)
    except ClassNotFound:
        lexer = TextLexer()
    rendered = highlight(code, lexer, _formatter_for_style(normalize_style(style)))
    out = rendered.split("\n")
    if len(out) > len(lines):
        out = out[: len(lines)]
    while len(out) < len(lines):
        out.append("")
    return out


def context_rows(item: Item, height: int, style: str = DEFAULT_STYLE, no_color: bool = False) -> list[str]:
    """Return up to ``height`` gutter-prefixed source rows around ``item``.

    The item's own line is marked with ``>`` in the gutter.
    """
    lines = file_lines(item.source_path)
    start, end = context_window(item.line_number, len(lines), min(height, MAX_CONTEXT_LINES))
    if end < start:
        return []
    snippet = list(lines[start - 1 : end])
    body = snippet if no_color else highlight_lines(snippet, item.source_path, style)
    gutter_width = len(str(end))
    rows: list[str] = []
    for offset, text in enumerate(body):
        line_number = start + offset
        marker = ">" if line_number == item.line_number else " "
        rows.append(f"{marker}{line_number:>{gutter_width}} {text}")
    return rows


__all__ = [
    "DEFAULT_STYLE",
    "MAX_CONTEXT_LINES",
    "context_rows",
    "context_window",
    "file_lines",
    "highlight_lines",
    "normalize_style",
]
