"""Mutable session state owned by the event loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..input.filter_input import FilterInput
from ..selection import SelectionEngine
from ..tag_colors import TagColor


class Mode(Enum):
    """Which handler receives the next key press."""

    NAVIGATION = "navigation"
    FILTER_ENTRY = "filter"
    HELP = "help"


@dataclass
class SessionState:
    engine: SelectionEngine
    tag_colors: dict[str, TagColor]
    filter_input: FilterInput = field(default_factory=FilterInput)
    mode: Mode = Mode.NAVIGATION
    width: int = 80
    height: int = 24
    list_start: int = 0
    dirty: bool = True
