"""Full-screen help modal.

Rendering helpers here are presentation-only and side-effect free, except for
``render_help_page`` which writes the composed frame to stdout.
"""

from __future__ import annotations

import os
import sys

from ..ansi import clip_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme

HELP_TITLE = "tuido help"

# (keys, description) pairs grouped under section headings.
HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "List",
        (
            ("Up/Down", "move selection (also k/j)"),
            ("Tab", "switch between TODO and DONE"),
            ("/", "filter by #tag (prefix match)"),
            ("?", "this help"),
            ("q", "quit"),
        ),
    ),
    (
        "Status",
        (
            ("x", "checked  [x]"),
            ("@ / a", "ongoing  [@]"),
            ("~ / - / s", "obsolete [~]"),
            ("Space", "open     [ ]"),
        ),
    ),
    (
        "Filter prompt",
        (
            ("Type/Backspace", "edit query   Ctrl+U clear"),
            ("Left/Right", "move caret   Home/End jump"),
            ("Esc", "leave prompt, keep filter"),
            ("Tab/Down", "leave prompt and act on the key"),
        ),
    ),
)


def help_lines(theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Return the styled body lines of the help modal."""
    lines: list[str] = []
    key_width = max(len(keys) for _title, entries in HELP_SECTIONS for keys, _desc in entries)
    for title, entries in HELP_SECTIONS:
        lines.append("")
        lines.append(f"{theme.help_heading}{title}{theme.reset}")
        for keys, description in entries:
            lines.append(f"  {theme.help_key}{keys.ljust(key_width)}{theme.reset}  {description}")
    lines.append("")
    lines.append(f"{theme.help_dim}Press any key to close{theme.reset}")
    return lines


def build_help_page(width: int, height: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Compose the help modal frame centered on a dimmed backdrop."""
    out: list[str] = ["\033[H\033[J"]
    body = help_lines(theme)

    modal_w = min(64, max(40, width - 10))
    modal_h = min(len(body) + 3, max(8, height - 2))
    modal_w = min(modal_w, max(4, width))
    modal_h = min(modal_h, max(3, height))
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)
    inner_w = max(1, modal_w - 2)
    inner_h = max(1, modal_h - 2)

    for row in range(height):
        out.append(f"\033[{row + 1};1H{theme.help_backdrop}")
        out.append(" " * max(1, width - 1))
        out.append(theme.reset)

    border = theme.help_modal_border
    reset = theme.reset
    out.append(f"\033[{y + 1};{x + 1}H{border}╭{'─' * inner_w}╮{reset}")
    for i in range(inner_h):
        out.append(f"\033[{y + 2 + i};{x + 1}H{border}│{reset}{' ' * inner_w}{border}│{reset}")
    out.append(f"\033[{y + modal_h};{x + 1}H{border}╰{'─' * inner_w}╯{reset}")

    title_x = x + max(2, (modal_w - 2 - len(HELP_TITLE)) // 2)
    out.append(f"\033[{y + 1};{title_x + 1}H{theme.help_modal_title}{HELP_TITLE}{reset}")

    for i in range(min(len(body), inner_h)):
        out.append(f"\033[{y + 2 + i};{x + 3}H")
        out.append(clip_ansi_line(body[i], inner_w - 2))
        out.append(reset)
    return "".join(out)


def render_help_page(width: int, height: int, theme: UITheme = DEFAULT_THEME) -> None:
    """Render the full-screen modal help page directly to stdout."""
    frame = build_help_page(width, height, theme)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))
