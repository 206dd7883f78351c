"""Single-line text input backing the ``#tag`` filter prompt."""

from __future__ import annotations

from dataclasses import dataclass

FILTER_PLACEHOLDER = "filter by #tag. press /"


@dataclass
class FilterInput:
    """Editable query text with a caret and focus flag."""

    value: str = ""
    position: int = 0
    focused: bool = False

    def focus(self) -> None:
        self.focused = True
        self.position = len(self.value)

    def blur(self) -> None:
        self.focused = False

    def set_value(self, value: str) -> None:
        self.value = value
        self.position = len(value)

    def handle_key(self, key: str) -> bool:
        """Apply one editing key and return whether the text changed.

        Caret movement keys change ``position`` only. Keys that are neither
        printable characters nor editing tokens are ignored.
        """
        before = self.value
        if key == "BACKSPACE":
            if self.position > 0:
                self.value = self.value[: self.position - 1] + self.value[self.position :]
                self.position -= 1
        elif key == "DELETE":
            self.value = self.value[: self.position] + self.value[self.position + 1 :]
        elif key == "CTRL_U":
            self.value = ""
            self.position = 0
        elif key == "LEFT":
            self.position = max(0, self.position - 1)
        elif key == "RIGHT":
            self.position = min(len(self.value), self.position + 1)
        elif key in {"HOME", "CTRL_A"}:
            self.position = 0
        elif key in {"END", "CTRL_E"}:
            self.position = len(self.value)
        elif len(key) == 1 and key.isprintable():
            self.value = self.value[: self.position] + key + self.value[self.position :]
            self.position += 1
        return self.value != before
