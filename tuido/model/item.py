"""Parsed task lines.

An item is created once per marker line found during scanning. Its status comes
from the marker at creation time and afterwards changes only via
``set_status``; the raw text is never re-parsed for status.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .status import MARKER_PREFIXES, Status

# List bullets and line-comment leaders allowed in front of a marker. A ``#``
# leader needs whitespace after it, or ``#[`` would read as a tag.
_LEADER_RE = re.compile(r"\s*(?:(?:--|//|[-*+;])\s*|#\s+)?")


class NotATaskLineError(ValueError):
    """Raised when a line without a recognized marker is parsed as a task."""


def _marker_span(text: str) -> tuple[int, Status] | None:
    """Return ``(end_offset, status)`` of the leading marker, if any."""
    leader = _LEADER_RE.match(text)
    start = leader.end() if leader is not None else 0
    for marker, status in MARKER_PREFIXES:
        if not text.startswith(marker, start):
            continue
        end = start + len(marker)
        if end < len(text) and not text[end].isspace():
            return None
        return end, status
    return None


def marker_status(text: str) -> Status | None:
    """Return the status encoded by the line's marker, or ``None``."""
    span = _marker_span(text)
    return span[1] if span is not None else None


def is_task_line(text: str) -> bool:
    """Return whether ``text`` starts with a recognized status marker."""
    return _marker_span(text) is not None


def parse_tags(text: str) -> list[str]:
    """Return ``#tag`` tokens of ``text`` in order, duplicates included."""
    return [token for token in text.split() if token.startswith("#") and len(token) > 1]


@dataclass(eq=False)
class Item:
    """One task line with its current status and tags.

    Items compare by identity: two lines with the same text in the same file
    are still distinct tasks.
    """

    source_path: str
    line_number: int
    raw_text: str
    status: Status
    tags: tuple[str, ...] = field(default=())

    @classmethod
    def create(cls, source_path: str, line_number: int, raw_text: str) -> Item:
        """Parse ``raw_text`` into an item.

        Raises ``NotATaskLineError`` when the line carries no marker; callers
        are expected to check ``is_task_line`` first.
        """
        span = _marker_span(raw_text)
        if span is None:
            raise NotATaskLineError(f"{source_path}:{line_number}: no status marker in {raw_text!r}")
        _end, status = span
        return cls(
            source_path=source_path,
            line_number=line_number,
            raw_text=raw_text,
            status=status,
            tags=tuple(parse_tags(raw_text)),
        )

    def set_status(self, status: Status) -> None:
        """Overwrite the status; every transition is allowed."""
        self.status = status

    @property
    def title(self) -> str:
        """Line text after the marker, used for display."""
        span = _marker_span(self.raw_text)
        if span is None:
            return self.raw_text.strip()
        return self.raw_text[span[0]:].strip()

    @property
    def location(self) -> str:
        return f"{self.source_path}:{self.line_number}"
