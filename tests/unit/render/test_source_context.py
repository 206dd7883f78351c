"""Source-context strip tests: windowing, gutters and highlighting."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from tuido.ansi import strip_ansi
from tuido.model import Item
from tuido.source_context import (
    DEFAULT_STYLE,
    context_rows,
    context_window,
    file_lines,
    highlight_lines,
    normalize_style,
)


class ContextWindowTests(unittest.TestCase):
    def test_line_is_centered_when_possible(self) -> None:
        self.assertEqual(context_window(10, 50, 5), (8, 12))

    def test_window_shifts_at_file_start_and_end(self) -> None:
        self.assertEqual(context_window(1, 50, 5), (1, 5))
        self.assertEqual(context_window(50, 50, 5), (46, 50))

    def test_window_shrinks_to_short_files(self) -> None:
        self.assertEqual(context_window(2, 3, 10), (1, 3))

    def test_empty_window(self) -> None:
        self.assertEqual(context_window(1, 0, 4), (1, 0))
        self.assertEqual(context_window(1, 10, 0), (1, 0))


class ContextRowsTests(unittest.TestCase):
    def test_rows_mark_the_task_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "plan.md"
            path.write_text("intro\n- [ ] task\nafter\n", encoding="utf-8")
            item = Item.create(str(path), 2, "- [ ] task")

            rows = context_rows(item, 3, no_color=True)

            self.assertEqual(rows, [" 1 intro", ">2 - [ ] task", " 3 after"])

    def test_missing_file_yields_no_rows(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            item = Item.create(str(Path(tmp) / "deleted.md"), 1, "[ ] gone")

            self.assertEqual(context_rows(item, 4, no_color=True), [])

    def test_highlighted_rows_keep_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "tasks.py"
            path.write_text("def f():\n    # [ ] handle errors\n    return 1\n", encoding="utf-8")
            item = Item.create(str(path), 2, "    # [ ] handle errors")

            rows = context_rows(item, 3, style=DEFAULT_STYLE)

            self.assertEqual(len(rows), 3)
            self.assertIn("\033[", rows[0])
            self.assertEqual(strip_ansi(rows[1]), ">2     # [ ] handle errors")

    def test_file_lines_are_cached_per_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cached.txt"
            path.write_text("one\n", encoding="utf-8")

            first = file_lines(str(path))
            path.write_text("changed\n", encoding="utf-8")

            self.assertEqual(file_lines(str(path)), first)


class HighlightTests(unittest.TestCase):
    def test_unknown_extension_falls_back_to_plain_text(self) -> None:
        lines = highlight_lines(["[ ] a", "[x] b"], "notes.unknownext")

        self.assertEqual([strip_ansi(line) for line in lines], ["[ ] a", "[x] b"])

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style"), DEFAULT_STYLE)
        self.assertEqual(normalize_style(None), DEFAULT_STYLE)
        self.assertEqual(normalize_style("native"), "native")


if __name__ == "__main__":
    unittest.main()
