"""Logging configuration for the command line entry point.

The interactive UI owns the terminal once scanning is done, so console output
is limited to warnings emitted during startup. ``--log-file`` routes
everything at the requested level to a file instead.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Path | None = None, level: int = logging.INFO) -> None:
    """Configure the root logger once, replacing any existing handlers.

    With ``log_file`` set, records at ``level`` and above go to that file.
    Otherwise only warnings and errors are written to stderr.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(str(log_file), encoding="utf-8")
        handler.setLevel(level)
        root.setLevel(level)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.WARNING)
        root.setLevel(logging.WARNING)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    logging.captureWarnings(True)
