"""Public runtime orchestration entry points.

This package groups the tracker bootstrap (``run_tracker``) and the
lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import TrackerOptions
    from .loop import RuntimeLoopTiming


def run_tracker(*args, **kwargs):
    """Lazily import the tracker entrypoint to avoid package-import cycles."""
    from .app import run_tracker as _run_tracker

    return _run_tracker(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopTiming":
        from . import loop as _loop

        return _loop.RuntimeLoopTiming
    if name == "TrackerOptions":
        from . import app as _app

        return _app.TrackerOptions
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_tracker",
    "run_main_loop",
    "RuntimeLoopTiming",
    "TrackerOptions",
]
