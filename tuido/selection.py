"""Selection engine: the single source of truth for what is shown.

Holds the full item list, the current view, the tag filter text, the derived
visible list and the cursor into it. The visible list is recomputed from the
full list after every mutation that can change it.
"""

from __future__ import annotations

from collections.abc import Sequence

from .model import Item, Status, View, other_view, parse_tags, view_includes


class EmptySelectionError(LookupError):
    """Raised when the current item is requested from an empty visible list."""


def filter_visible(items: Sequence[Item], view: View, filter_tags: Sequence[str]) -> tuple[Item, ...]:
    """Return items in ``view`` that match ``filter_tags``, in original order.

    An item matches when any of its tags starts with any filter tag. A
    complete tag name therefore also matches longer tags sharing it as a
    prefix (``#des`` and ``#design`` both match ``#designer``).
    """
    in_view = [item for item in items if view_includes(view, item.status)]
    if not filter_tags:
        return tuple(in_view)
    return tuple(
        item
        for item in in_view
        if any(tag.startswith(prefix) for tag in item.tags for prefix in filter_tags)
    )


class SelectionEngine:
    """View/filter/cursor state machine over a fixed item list."""

    def __init__(
        self,
        items: Sequence[Item],
        view: View = View.ACTIVE,
        filter_text: str = "",
    ) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        self._view = view
        self._filter_text = filter_text
        self._filter_tags: tuple[str, ...] = tuple(parse_tags(filter_text))
        self._visible: tuple[Item, ...] = ()
        self._cursor = 0
        self._recompute()

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def view(self) -> View:
        return self._view

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def filter_tags(self) -> tuple[str, ...]:
        return self._filter_tags

    @property
    def visible(self) -> tuple[Item, ...]:
        return self._visible

    @property
    def cursor(self) -> int:
        """Index into ``visible``; ``-1`` when nothing is visible."""
        return self._cursor

    @property
    def is_empty(self) -> bool:
        return not self._visible

    def set_view(self, view: View) -> None:
        self._view = view
        self._recompute()

    def toggle_view(self) -> None:
        """Switch between the active and resolved views."""
        self.set_view(other_view(self._view))

    def set_filter_text(self, text: str) -> None:
        self._filter_text = text
        self._filter_tags = tuple(parse_tags(text))
        self._recompute()

    def move_cursor(self, delta: int) -> bool:
        """Move the cursor by ``delta`` rows, clamped to the visible list.

        Returns whether the cursor moved. Does nothing on an empty list.
        """
        if not self._visible:
            return False
        target = max(0, min(self._cursor + delta, len(self._visible) - 1))
        if target == self._cursor:
            return False
        self._cursor = target
        return True

    def current_item(self) -> Item:
        if not self._visible:
            raise EmptySelectionError("no item matches the current view and filter")
        return self._visible[self._cursor]

    def set_status_on_current(self, status: Status) -> bool:
        """Set the current item's status and recompute.

        The item may leave the visible list as a result. Returns ``False``
        without doing anything when the list is empty.
        """
        if not self._visible:
            return False
        self.current_item().set_status(status)
        self._recompute()
        return True

    def refresh(self) -> None:
        """Recompute after item statuses were changed outside the engine."""
        self._recompute()

    def _recompute(self) -> None:
        self._visible = filter_visible(self._items, self._view, self._filter_tags)
        if not self._visible:
            self._cursor = -1
        else:
            self._cursor = max(0, min(self._cursor, len(self._visible) - 1))


__all__ = ["EmptySelectionError", "SelectionEngine", "filter_visible"]
