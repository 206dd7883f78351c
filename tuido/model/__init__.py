"""Task domain model: statuses, views and parsed items.

This package has no terminal or filesystem dependencies.
"""

from __future__ import annotations

from .item import Item, NotATaskLineError, is_task_line, marker_status, parse_tags
from .status import (
    MARKER_PREFIXES,
    STATUS_MARKERS,
    VIEW_LABELS,
    VIEW_STATUSES,
    Status,
    View,
    other_view,
    view_includes,
)

__all__ = [
    "Item",
    "NotATaskLineError",
    "is_task_line",
    "marker_status",
    "parse_tags",
    "Status",
    "View",
    "MARKER_PREFIXES",
    "STATUS_MARKERS",
    "VIEW_LABELS",
    "VIEW_STATUSES",
    "other_view",
    "view_includes",
]
