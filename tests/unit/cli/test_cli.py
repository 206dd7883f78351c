"""CLI argument and default-path behavior tests.

Verifies how ``tuido.cli.main`` resolves the scan root, layers flags over
persisted config and reports fatal startup errors.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tuido import cli
from tuido.runtime import config
from tuido.scan import DEFAULT_SUFFIXES, ScanError


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        config_patch = mock.patch(
            "tuido.runtime.config.CONFIG_PATH", Path(self._tmp.name) / "config" / "config.json"
        )
        config_patch.start()
        self.addCleanup(config_patch.stop)
        logging_patch = mock.patch("tuido.cli.setup_logging")
        self.setup_logging = logging_patch.start()
        self.addCleanup(logging_patch.stop)

    def _main(self, *argv: str, default_path: Path | None = None):
        with mock.patch.object(sys, "argv", ["tuido", *argv]), mock.patch("tuido.cli.run_tracker") as run_tracker:
            cli.main(default_path=default_path)
        run_tracker.assert_called_once()
        return run_tracker.call_args.args

    def test_main_defaults_to_current_working_directory_when_no_path_arg(self) -> None:
        root = Path(self._tmp.name).resolve()
        previous_cwd = Path.cwd()
        try:
            os.chdir(root)
            path, options = self._main()
        finally:
            os.chdir(previous_cwd)

        self.assertEqual(path, root)
        self.assertEqual(options.suffixes, DEFAULT_SUFFIXES)
        self.assertFalse(options.list_only)
        self.assertFalse(options.show_hidden)
        self.assertEqual(options.context_lines, 4)

    def test_main_uses_explicit_path_argument_over_default(self) -> None:
        target = Path(self._tmp.name) / "target"
        target.mkdir()

        path, _options = self._main(str(target), default_path=Path(self._tmp.name) / "unused")

        self.assertEqual(path, target.resolve())

    def test_flags_are_passed_through(self) -> None:
        _path, options = self._main(
            self._tmp.name,
            "--ext",
            "org",
            "--ext",
            ".MD",
            "--list",
            "--hidden",
            "--skip-unreadable",
            "--no-color",
            "--context-lines",
            "0",
            "--seed",
            "7",
            "--style",
            "native",
        )

        self.assertEqual(options.suffixes, (".org", ".md"))
        self.assertTrue(options.list_only)
        self.assertTrue(options.show_hidden)
        self.assertTrue(options.skip_unreadable)
        self.assertTrue(options.no_color)
        self.assertEqual(options.context_lines, 0)
        self.assertEqual(options.seed, 7)
        self.assertEqual(options.style, "native")

    def test_config_values_fill_in_missing_flags(self) -> None:
        config.save_config(
            {"extensions": [".xit"], "show_hidden": True, "style": "native", "context_lines": 9, "theme": "ocean"}
        )

        _path, options = self._main(self._tmp.name)

        self.assertEqual(options.suffixes, (".xit",))
        self.assertTrue(options.show_hidden)
        self.assertEqual(options.style, "native")
        self.assertEqual(options.context_lines, 9)
        self.assertEqual(options.theme_name, "ocean")

    def test_theme_flag_is_remembered(self) -> None:
        _path, options = self._main(self._tmp.name, "--theme", "ocean")

        self.assertEqual(options.theme_name, "ocean")
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_missing_path_exits_with_message(self) -> None:
        missing = Path(self._tmp.name) / "missing"
        with mock.patch.object(sys, "argv", ["tuido", str(missing)]), mock.patch("tuido.cli.run_tracker") as run_tracker:
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        run_tracker.assert_not_called()
        self.assertEqual(str(ctx.exception), f"Path not found: {missing}")

    def test_file_path_exits_with_message(self) -> None:
        target = Path(self._tmp.name) / "todo.md"
        target.write_text("[ ] a\n", encoding="utf-8")
        with mock.patch.object(sys, "argv", ["tuido", str(target)]), mock.patch("tuido.cli.run_tracker"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        self.assertEqual(str(ctx.exception), f"Not a directory: {target}")

    def test_scan_error_becomes_exit_message(self) -> None:
        with mock.patch.object(sys, "argv", ["tuido", self._tmp.name]), mock.patch(
            "tuido.cli.run_tracker", side_effect=ScanError("cannot read /x/y.md: Permission denied")
        ):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        self.assertEqual(str(ctx.exception), "tuido: cannot read /x/y.md: Permission denied")

    def test_unreadable_root_exits_before_listing(self) -> None:
        def fake_walk(top, onerror=None):
            onerror(PermissionError(13, "Permission denied", str(top)))
            return iter(())

        root = Path(self._tmp.name).resolve()
        with mock.patch.object(sys, "argv", ["tuido", str(root), "--list"]), mock.patch(
            "tuido.scan.os.walk", side_effect=fake_walk
        ), mock.patch("tuido.runtime.app.sys.stdout") as stdout:
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        stdout.write.assert_not_called()
        self.assertEqual(str(ctx.exception), f"tuido: cannot read {root}: Permission denied")

    def test_out_of_range_context_lines_is_rejected(self) -> None:
        with mock.patch.object(sys, "argv", ["tuido", "--context-lines", "99"]), mock.patch(
            "tuido.cli.run_tracker"
        ), mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main()

        self.assertEqual(ctx.exception.code, 2)

    def test_debug_flag_raises_log_level(self) -> None:
        log_file = Path(self._tmp.name) / "tuido.log"
        self._main(self._tmp.name, "--debug", "--log-file", str(log_file))

        self.setup_logging.assert_called_once_with(log_file, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
