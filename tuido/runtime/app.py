"""Runtime composition layer for tuido.

Scans the tree once, builds the tag color table and session state, then either
prints a plain listing or hands control to the interactive loop.
"""

from __future__ import annotations

import logging
import os
import random
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..input.controller import InteractionController
from ..model import Item, View, view_includes
from ..render import RenderOptions, render_frame, render_list_text
from ..scan import collect_items, discover_files
from ..selection import SelectionEngine
from ..source_context import normalize_style
from ..tag_colors import assign_tag_colors
from ..ui_theme import resolve_theme
from .loop import run_main_loop
from .state import SessionState
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackerOptions:
    """Resolved startup settings (CLI flags layered over config)."""

    suffixes: tuple[str, ...]
    show_hidden: bool = False
    skip_unreadable: bool = False
    theme_name: str | None = None
    no_color: bool = False
    style: str | None = None
    context_lines: int = 4
    list_only: bool = False
    seed: int | None = None


def load_items(root: Path, options: TrackerOptions) -> list[Item]:
    """Discover and scan files under ``root``; raises ``ScanError`` on I/O failure."""
    files = discover_files(root, options.suffixes, show_hidden=options.show_hidden)
    items = collect_items(files, skip_unreadable=options.skip_unreadable)
    logger.info("found %d task(s) in %d file(s) under %s", len(items), len(files), root)
    return items


def build_session(items: Sequence[Item], rng: random.Random) -> SessionState:
    """Create the initial session state for ``items``."""
    return SessionState(
        engine=SelectionEngine(items),
        tag_colors=assign_tag_colors(items, rng),
    )


def _is_interactive() -> bool:
    return os.isatty(sys.stdout.fileno()) and os.isatty(sys.stdin.fileno())


def run_tracker(root: Path, options: TrackerOptions) -> None:
    """Scan ``root`` and run the tracker until the user quits."""
    items = load_items(root, options)
    seed = options.seed if options.seed is not None else time.time_ns()
    state = build_session(items, random.Random(seed))
    color = not options.no_color and os.isatty(sys.stdout.fileno())
    theme = resolve_theme(options.theme_name, no_color=not color)

    if options.list_only or not _is_interactive():
        active = [item for item in items if view_includes(View.ACTIVE, item.status)]
        sys.stdout.write(render_list_text(active, state.tag_colors, theme, root))
        return

    render_options = RenderOptions(
        root=root,
        theme=theme,
        style=normalize_style(options.style),
        context_lines=options.context_lines,
    )
    terminal = TerminalController(sys.stdin.fileno(), sys.stdout.fileno())
    controller = InteractionController(state)
    run_main_loop(
        state,
        controller,
        terminal,
        sys.stdin.fileno(),
        render=lambda session, cursor_visible: render_frame(session, render_options, cursor_visible),
        context_lines=render_options.context_lines,
    )
    logger.debug("session ended")
