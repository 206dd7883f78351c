"""Input-layer public API for key decoding and interaction handling.

Exports are split between low-level terminal decoding (``read_key``) and the
mode-aware ``InteractionController`` used by the runtime loop. The controller
is imported lazily because it depends on ``tuido.runtime.state``, which in
turn needs ``FilterInput`` from this package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .filter_input import FILTER_PLACEHOLDER, FilterInput
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

if TYPE_CHECKING:
    from .controller import STATUS_KEYS, InteractionController


def __getattr__(name: str):
    if name in {"InteractionController", "STATUS_KEYS"}:
        from . import controller as _controller

        return getattr(_controller, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "FILTER_PLACEHOLDER",
    "FilterInput",
    "KeyComboBinding",
    "KeyComboRegistry",
    "InteractionController",
    "STATUS_KEYS",
]
