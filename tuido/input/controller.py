"""Interaction controller: key and resize events to state changes.

Three modes decide who gets a key: navigation (list movement, view toggle,
status keys), filter entry (text editing of the ``#tag`` query) and help
(any key dismisses). Keys with no binding in the current mode do nothing.
"""

from __future__ import annotations

from ..model import Status
from ..runtime.state import Mode, SessionState
from .key_registry import KeyComboBinding, KeyComboRegistry

FILTER_BLUR_KEYS = frozenset({"ESC", "TAB", "DOWN"})

STATUS_KEYS: dict[str, Status] = {
    "x": Status.CHECKED,
    "-": Status.OBSOLETE,
    "~": Status.OBSOLETE,
    "s": Status.OBSOLETE,
    "@": Status.ONGOING,
    "a": Status.ONGOING,
    " ": Status.OPEN,
}


class InteractionController:
    """Dispatch input events against one ``SessionState``."""

    def __init__(self, state: SessionState) -> None:
        self.state = state
        self._navigation = self._build_navigation_registry()

    def _build_navigation_registry(self) -> KeyComboRegistry:
        registry = KeyComboRegistry()
        registry.register_bindings(
            KeyComboBinding(("UP", "k"), lambda: self._move(-1)),
            KeyComboBinding(("DOWN", "j"), lambda: self._move(1)),
            KeyComboBinding(("TAB",), self._toggle_view),
            KeyComboBinding(("/",), self._focus_filter),
            KeyComboBinding(("?",), self._open_help),
            KeyComboBinding(("q",), lambda: True),
        )
        for key, status in STATUS_KEYS.items():
            registry.register_binding(KeyComboBinding((key,), self._status_setter(status)))
        return registry

    def _status_setter(self, status: Status):
        def set_status() -> bool:
            if self.state.engine.set_status_on_current(status):
                self.state.dirty = True
            return False

        return set_status

    def _move(self, delta: int) -> bool:
        if self.state.engine.move_cursor(delta):
            self.state.dirty = True
        return False

    def _toggle_view(self) -> bool:
        self.state.engine.toggle_view()
        self.state.list_start = 0
        self.state.dirty = True
        return False

    def _focus_filter(self) -> bool:
        self.state.filter_input.focus()
        self.state.mode = Mode.FILTER_ENTRY
        self.state.dirty = True
        return False

    def _open_help(self) -> bool:
        self.state.mode = Mode.HELP
        self.state.dirty = True
        return False

    def handle_key(self, key: str) -> bool:
        """Handle one key token and return ``True`` when the session should end."""
        state = self.state
        if state.mode is Mode.HELP:
            state.mode = Mode.NAVIGATION
            state.dirty = True
            return False

        if state.mode is Mode.FILTER_ENTRY:
            if key not in FILTER_BLUR_KEYS:
                self._edit_filter(key)
                return False
            state.filter_input.blur()
            state.mode = Mode.NAVIGATION
            state.dirty = True
            if key == "ESC":
                return False

        return bool(self._navigation.dispatch(key))

    def _edit_filter(self, key: str) -> None:
        filter_input = self.state.filter_input
        position = filter_input.position
        if filter_input.handle_key(key):
            self.state.engine.set_filter_text(filter_input.value)
            self.state.list_start = 0
            self.state.dirty = True
        elif filter_input.position != position:
            self.state.dirty = True

    def handle_resize(self, height: int, width: int) -> None:
        """Record new terminal dimensions; mode and selection are untouched."""
        if (height, width) == (self.state.height, self.state.width):
            return
        self.state.height = height
        self.state.width = width
        self.state.dirty = True
