"""Rendering engine for the task list view.

Builds complete ANSI frames from ``SessionState`` without mutating it: the
filter prompt, the visible items, an optional source-context strip and the
status bar. The help modal lives in ``tuido.render.help``.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..ansi import clip_ansi_line, fit_ansi_line
from ..input.filter_input import FILTER_PLACEHOLDER
from ..model import STATUS_MARKERS, VIEW_LABELS, Item, other_view
from ..runtime.state import Mode, SessionState
from ..source_context import DEFAULT_STYLE, context_rows
from ..tag_colors import TagColor, tag_color_sgr
from ..ui_theme import DEFAULT_THEME, UITheme
from .help import build_help_page, help_lines, render_help_page

MIN_LIST_ROWS = 3
_TOKEN_RE = re.compile(r"\s+|\S+")


@dataclass(frozen=True)
class RenderOptions:
    """Per-session presentation settings."""

    root: Path
    theme: UITheme = DEFAULT_THEME
    style: str = DEFAULT_STYLE
    context_lines: int = 4


@dataclass(frozen=True)
class FrameLayout:
    list_rows: int
    context_rows: int


def frame_layout(height: int, context_lines: int, has_item: bool) -> FrameLayout:
    """Split terminal rows between prompt, list, context strip and status bar.

    The context strip (plus its divider) is dropped whenever it would leave
    fewer than ``MIN_LIST_ROWS`` rows for the list.
    """
    body = max(1, height - 2)
    if has_item and context_lines > 0 and body - (context_lines + 1) >= MIN_LIST_ROWS:
        return FrameLayout(list_rows=body - context_lines - 1, context_rows=context_lines)
    return FrameLayout(list_rows=body, context_rows=0)


def scroll_start(list_start: int, cursor: int, rows: int, total: int) -> int:
    """Return a list offset that keeps ``cursor`` inside ``rows`` visible rows."""
    if cursor < 0 or total <= 0:
        return 0
    if cursor < list_start:
        list_start = cursor
    elif cursor >= list_start + rows:
        list_start = cursor - rows + 1
    return max(0, min(list_start, max(0, total - rows)))


def selected_with_ansi(text: str) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return "\033[7m" + text.replace("\033[0m", "\033[0;7m") + "\033[0m"


def colorize_tags(text: str, tag_colors: dict[str, TagColor], theme: UITheme, base: str = "") -> str:
    """Color every known ``#tag`` token of ``text``; other tokens keep ``base``."""
    if not theme.use_tag_colors or not tag_colors:
        return f"{base}{text}{theme.reset}" if base else text
    out: list[str] = []
    for token in _TOKEN_RE.findall(text):
        color = tag_colors.get(token)
        if color is not None:
            out.append(f"{tag_color_sgr(color)}{token}{theme.reset}")
        else:
            out.append(f"{base}{token}{theme.reset}" if base else token)
    return "".join(out)


def display_path(source_path: str, root: Path) -> str:
    """Return ``source_path`` relative to ``root`` when it lies beneath it."""
    try:
        return str(Path(source_path).relative_to(root))
    except ValueError:
        return source_path


def format_item(item: Item, tag_colors: dict[str, TagColor], theme: UITheme, root: Path) -> str:
    status_style = theme.status_style(item.status)
    marker = f"{status_style}{STATUS_MARKERS[item.status]}{theme.reset}"
    title = colorize_tags(item.title, tag_colors, theme, base=status_style)
    location = f"{theme.location}{display_path(item.source_path, root)}:{item.line_number}{theme.reset}"
    return f" {marker} {title}  {location}"


def render_list_text(
    items: Iterable[Item],
    tag_colors: dict[str, TagColor],
    theme: UITheme,
    root: Path,
) -> str:
    """Plain listing used when no interactive terminal is attached."""
    return "".join(format_item(item, tag_colors, theme, root).lstrip() + "\n" for item in items)


def build_status_line(left_text: str, width: int, right_text: str = "│ ? Help") -> str:
    usable = max(1, width - 1)
    if usable <= len(right_text):
        return right_text[-usable:]
    left_limit = max(0, usable - len(right_text) - 1)
    left = left_text[:left_limit]
    gap = " " * (usable - len(left) - len(right_text))
    return f"{left}{gap}{right_text}"


def _filter_prompt(state: SessionState, theme: UITheme, cursor_visible: bool) -> str:
    filter_input = state.filter_input
    if filter_input.focused:
        caret = "_" if cursor_visible else " "
        before = filter_input.value[: filter_input.position]
        after = filter_input.value[filter_input.position :]
        return f"{theme.filter_query}/ {before}{caret}{after}{theme.reset}"
    if filter_input.value:
        return f"{theme.filter_query}/ {filter_input.value}{theme.reset}"
    return f"{theme.filter_hint}/ {FILTER_PLACEHOLDER}{theme.reset}"


def _status_text(state: SessionState) -> str:
    engine = state.engine
    label = VIEW_LABELS[engine.view]
    position = f"{engine.cursor + 1}/{len(engine.visible)}" if engine.visible else "0/0"
    parts = [f" {label} {position}"]
    if engine.filter_tags:
        parts.append(" ".join(engine.filter_tags))
    parts.append(f"tab: {VIEW_LABELS[other_view(engine.view)]}")
    return "  ·  ".join(parts)


def build_frame(state: SessionState, options: RenderOptions, cursor_visible: bool = True) -> str:
    """Compose one full list-view frame for the current state."""
    theme = options.theme
    width = max(1, state.width)
    engine = state.engine
    layout = frame_layout(state.height, options.context_lines, not engine.is_empty)

    out: list[str] = ["\033[H\033[J"]
    prompt = fit_ansi_line(_filter_prompt(state, theme, cursor_visible), width)
    if state.filter_input.focused:
        prompt = selected_with_ansi(prompt)
    out.append(prompt)
    out.append("\r\n")

    visible = engine.visible
    for row in range(layout.list_rows):
        idx = state.list_start + row
        if idx < len(visible):
            text = fit_ansi_line(format_item(visible[idx], state.tag_colors, theme, options.root), width)
            if idx == engine.cursor:
                text = selected_with_ansi(text)
        elif row == 0 and not visible:
            hint = "no tasks match the filter" if engine.filter_tags else "no tasks here"
            text = clip_ansi_line(f"{theme.empty_hint}  {hint}{theme.reset}", width)
        else:
            text = ""
        out.append(text)
        out.append("\r\n")

    if layout.context_rows:
        out.append(f"{theme.divider}{'─' * width}{theme.reset}")
        out.append("\r\n")
        rows = context_rows(
            engine.current_item(),
            layout.context_rows,
            style=options.style,
            no_color=not theme.use_tag_colors,
        )
        for row in range(layout.context_rows):
            text = clip_ansi_line(rows[row], width) if row < len(rows) else ""
            out.append(text)
            out.append(theme.reset)
            out.append("\r\n")

    out.append(theme.reverse)
    out.append(build_status_line(_status_text(state), width))
    out.append(theme.reset)
    return "".join(out)


def render_frame(state: SessionState, options: RenderOptions, cursor_visible: bool = True) -> None:
    """Write the frame for ``state`` to stdout, using the help modal in help mode."""
    if state.mode is Mode.HELP:
        render_help_page(state.width, state.height, options.theme)
        return
    frame = build_frame(state, options, cursor_visible)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))


__all__ = [
    "FrameLayout",
    "MIN_LIST_ROWS",
    "RenderOptions",
    "build_frame",
    "build_help_page",
    "build_status_line",
    "colorize_tags",
    "display_path",
    "format_item",
    "frame_layout",
    "help_lines",
    "render_frame",
    "render_help_page",
    "render_list_text",
    "scroll_start",
    "selected_with_ansi",
]
