"""Unit tests for mode-aware key dispatch.

Covers navigation bindings, filter prompt focus/blur handoff, the help
overlay and resize bookkeeping.
"""

from __future__ import annotations

import random
import unittest

from tuido.input import InteractionController
from tuido.model import Item, Status, View
from tuido.runtime.app import build_session
from tuido.runtime.state import Mode, SessionState


def _make_state(*lines: str) -> SessionState:
    items = [Item.create("todo.md", idx + 1, line) for idx, line in enumerate(lines)]
    state = build_session(items, random.Random(0))
    state.dirty = False
    return state


class NavigationKeyTests(unittest.TestCase):
    def test_down_and_up_move_cursor(self) -> None:
        state = _make_state("[ ] a", "[ ] b", "[ ] c")
        controller = InteractionController(state)

        controller.handle_key("DOWN")
        controller.handle_key("j")
        self.assertEqual(state.engine.cursor, 2)
        self.assertTrue(state.dirty)

        controller.handle_key("UP")
        controller.handle_key("k")
        self.assertEqual(state.engine.cursor, 0)

    def test_moving_past_the_end_does_not_mark_dirty(self) -> None:
        state = _make_state("[ ] only")
        controller = InteractionController(state)

        controller.handle_key("DOWN")

        self.assertEqual(state.engine.cursor, 0)
        self.assertFalse(state.dirty)

    def test_tab_toggles_view_and_resets_scroll(self) -> None:
        state = _make_state("[ ] a", "[x] b")
        state.list_start = 3
        controller = InteractionController(state)

        self.assertFalse(controller.handle_key("TAB"))

        self.assertEqual(state.engine.view, View.RESOLVED)
        self.assertEqual(state.list_start, 0)
        self.assertEqual([item.title for item in state.engine.visible], ["b"])

    def test_status_keys_set_status_on_current_item(self) -> None:
        expected = {
            "x": Status.CHECKED,
            "-": Status.OBSOLETE,
            "~": Status.OBSOLETE,
            "s": Status.OBSOLETE,
            "@": Status.ONGOING,
            "a": Status.ONGOING,
            " ": Status.OPEN,
        }
        for key, status in expected.items():
            with self.subTest(key=key):
                state = _make_state("[@] target")
                controller = InteractionController(state)
                item = state.engine.current_item()

                controller.handle_key(key)

                self.assertEqual(item.status, status)
                self.assertTrue(state.dirty)

    def test_checking_item_removes_it_from_active_list(self) -> None:
        state = _make_state("[ ] first", "[ ] second")
        controller = InteractionController(state)

        controller.handle_key("x")

        self.assertEqual([item.title for item in state.engine.visible], ["second"])
        self.assertEqual(state.engine.items[0].status, Status.CHECKED)

    def test_status_key_on_empty_list_is_a_no_op(self) -> None:
        state = _make_state("[x] done")
        controller = InteractionController(state)

        self.assertFalse(controller.handle_key("x"))
        self.assertFalse(state.dirty)

    def test_q_requests_exit(self) -> None:
        state = _make_state("[ ] a")
        controller = InteractionController(state)

        self.assertTrue(controller.handle_key("q"))

    def test_unbound_key_changes_nothing(self) -> None:
        state = _make_state("[ ] a", "[ ] b")
        controller = InteractionController(state)

        self.assertFalse(controller.handle_key("z"))
        self.assertFalse(controller.handle_key("F5"))

        self.assertFalse(state.dirty)
        self.assertEqual(state.mode, Mode.NAVIGATION)
        self.assertEqual(state.engine.cursor, 0)
        self.assertEqual([item.status for item in state.engine.items], [Status.OPEN, Status.OPEN])


class FilterEntryTests(unittest.TestCase):
    def test_slash_focuses_filter_prompt(self) -> None:
        state = _make_state("[ ] a")
        controller = InteractionController(state)

        controller.handle_key("/")

        self.assertEqual(state.mode, Mode.FILTER_ENTRY)
        self.assertTrue(state.filter_input.focused)

    def test_typing_updates_filter_and_visible_list(self) -> None:
        state = _make_state("[ ] plan #design", "[ ] ship #release")
        controller = InteractionController(state)
        controller.handle_key("/")

        for ch in "#des":
            controller.handle_key(ch)

        self.assertEqual(state.engine.filter_text, "#des")
        self.assertEqual([item.title for item in state.engine.visible], ["plan #design"])

    def test_keys_bound_in_navigation_are_text_while_filter_is_focused(self) -> None:
        state = _make_state("[ ] a")
        controller = InteractionController(state)
        controller.handle_key("/")

        self.assertFalse(controller.handle_key("q"))
        controller.handle_key("x")

        self.assertEqual(state.filter_input.value, "qx")
        self.assertEqual(state.engine.items[0].status, Status.OPEN)

    def test_backspace_edits_filter_text(self) -> None:
        state = _make_state("[ ] a #one")
        controller = InteractionController(state)
        controller.handle_key("/")
        for ch in "#zz":
            controller.handle_key(ch)
        self.assertEqual(state.engine.visible, ())

        controller.handle_key("BACKSPACE")
        controller.handle_key("BACKSPACE")

        self.assertEqual(state.engine.filter_text, "#")
        self.assertEqual(len(state.engine.visible), 1)

    def test_escape_leaves_prompt_and_keeps_filter(self) -> None:
        state = _make_state("[ ] a #x", "[ ] b #y")
        controller = InteractionController(state)
        controller.handle_key("/")
        for ch in "#x":
            controller.handle_key(ch)

        controller.handle_key("ESC")

        self.assertEqual(state.mode, Mode.NAVIGATION)
        self.assertFalse(state.filter_input.focused)
        self.assertEqual(state.engine.filter_text, "#x")
        self.assertEqual(len(state.engine.visible), 1)

    def test_tab_leaves_prompt_and_toggles_view(self) -> None:
        state = _make_state("[ ] a", "[x] b")
        controller = InteractionController(state)
        controller.handle_key("/")

        controller.handle_key("TAB")

        self.assertEqual(state.mode, Mode.NAVIGATION)
        self.assertEqual(state.engine.view, View.RESOLVED)

    def test_down_leaves_prompt_and_moves_cursor(self) -> None:
        state = _make_state("[ ] a", "[ ] b")
        controller = InteractionController(state)
        controller.handle_key("/")

        controller.handle_key("DOWN")

        self.assertEqual(state.mode, Mode.NAVIGATION)
        self.assertEqual(state.engine.cursor, 1)

    def test_refocus_keeps_previous_text(self) -> None:
        state = _make_state("[ ] a #x")
        controller = InteractionController(state)
        controller.handle_key("/")
        controller.handle_key("#")
        controller.handle_key("ESC")

        controller.handle_key("/")
        controller.handle_key("x")

        self.assertEqual(state.filter_input.value, "#x")
        self.assertEqual(state.engine.filter_tags, ("#x",))


class HelpModeTests(unittest.TestCase):
    def test_question_mark_opens_help_and_any_key_closes_it(self) -> None:
        state = _make_state("[ ] a", "[ ] b")
        controller = InteractionController(state)

        controller.handle_key("?")
        self.assertEqual(state.mode, Mode.HELP)

        self.assertFalse(controller.handle_key("q"))
        self.assertEqual(state.mode, Mode.NAVIGATION)

    def test_key_that_closes_help_is_not_dispatched(self) -> None:
        state = _make_state("[ ] a", "[ ] b")
        controller = InteractionController(state)
        controller.handle_key("?")

        controller.handle_key("j")
        controller.handle_key("x")

        self.assertEqual(state.engine.cursor, 0)
        self.assertEqual(state.engine.items[0].status, Status.CHECKED)


class ResizeTests(unittest.TestCase):
    def test_resize_records_dimensions_and_marks_dirty(self) -> None:
        state = _make_state("[ ] a")
        controller = InteractionController(state)

        controller.handle_resize(40, 120)

        self.assertEqual((state.height, state.width), (40, 120))
        self.assertTrue(state.dirty)

    def test_resize_to_same_size_is_ignored(self) -> None:
        state = _make_state("[ ] a")
        controller = InteractionController(state)

        controller.handle_resize(state.height, state.width)

        self.assertFalse(state.dirty)

    def test_resize_keeps_mode_and_selection(self) -> None:
        state = _make_state("[ ] a", "[ ] b")
        controller = InteractionController(state)
        controller.handle_key("DOWN")
        controller.handle_key("/")

        controller.handle_resize(10, 30)

        self.assertEqual(state.mode, Mode.FILTER_ENTRY)
        self.assertEqual(state.engine.cursor, 1)


if __name__ == "__main__":
    unittest.main()
