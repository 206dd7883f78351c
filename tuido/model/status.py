"""Task status and view enums plus the marker prefix table.

Markers are looked up in one ordered table; the first recognized marker wins.
Views partition statuses into the active list and the resolved list.
"""

from __future__ import annotations

from enum import Enum


class Status(Enum):
    """Lifecycle state of one task line."""

    OPEN = "open"
    ONGOING = "ongoing"
    CHECKED = "checked"
    OBSOLETE = "obsolete"


class View(Enum):
    """Coarse partition of items currently shown."""

    ACTIVE = "active"
    RESOLVED = "resolved"


MARKER_PREFIXES: tuple[tuple[str, Status], ...] = (
    ("[ ]", Status.OPEN),
    ("[@]", Status.ONGOING),
    ("[x]", Status.CHECKED),
    ("[X]", Status.CHECKED),
    ("[~]", Status.OBSOLETE),
)

STATUS_MARKERS: dict[Status, str] = {
    Status.OPEN: "[ ]",
    Status.ONGOING: "[@]",
    Status.CHECKED: "[x]",
    Status.OBSOLETE: "[~]",
}

VIEW_STATUSES: dict[View, frozenset[Status]] = {
    View.ACTIVE: frozenset({Status.OPEN, Status.ONGOING}),
    View.RESOLVED: frozenset({Status.CHECKED, Status.OBSOLETE}),
}

VIEW_LABELS: dict[View, str] = {
    View.ACTIVE: "TODO",
    View.RESOLVED: "DONE",
}


def view_includes(view: View, status: Status) -> bool:
    """Return whether ``status`` belongs to ``view``."""
    return status in VIEW_STATUSES[view]


def other_view(view: View) -> View:
    """Return the view that ``tab`` switches to."""
    return View.RESOLVED if view is View.ACTIVE else View.ACTIVE


__all__ = [
    "Status",
    "View",
    "MARKER_PREFIXES",
    "STATUS_MARKERS",
    "VIEW_STATUSES",
    "VIEW_LABELS",
    "view_includes",
    "other_view",
]
