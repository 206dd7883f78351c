"""Main interactive event loop for the terminal UI.

Single-threaded: each iteration checks the terminal size, redraws when state is
dirty, reads at most one key and dispatches it to completion. The only timer
is the filter caret blink.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..input.controller import InteractionController
from ..render import frame_layout, scroll_start
from .state import Mode, SessionState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    filter_cursor_blink_seconds: float = 0.5
    key_timeout_ms: int = 120


def sync_list_scroll(state: SessionState, context_lines: int) -> None:
    """Keep the list offset such that the cursor row is on screen."""
    engine = state.engine
    layout = frame_layout(state.height, context_lines, not engine.is_empty)
    start = scroll_start(state.list_start, engine.cursor, layout.list_rows, len(engine.visible))
    if start != state.list_start:
        state.list_start = start
        state.dirty = True


def run_main_loop(
    state: SessionState,
    controller: InteractionController,
    terminal: TerminalController,
    stdin_fd: int,
    render: Callable[[SessionState, bool], None],
    context_lines: int = 0,
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """Run the interactive loop until a quit key is handled.

    ``render`` receives the state and whether the filter caret is currently
    in its visible blink phase.
    """
    timing = timing or RuntimeLoopTiming()
    cursor_visible = True

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            controller.handle_resize(term.lines, term.columns)
            sync_list_scroll(state, context_lines)

            editing = state.mode is Mode.FILTER_ENTRY
            if editing:
                blink_phase = (int(time.monotonic() / timing.filter_cursor_blink_seconds) % 2) == 0
                if blink_phase != cursor_visible:
                    cursor_visible = blink_phase
                    state.dirty = True
            elif not cursor_visible:
                cursor_visible = True
                state.dirty = True

            if state.dirty:
                render(state, cursor_visible)
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue
            if controller.handle_key(key):
                break
