"""Logging setup for the server and command line.

stdout carries the MCP protocol stream, so all log output goes to stderr.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach a single stderr handler to the root logger and set its level.

    Raises:
        ValueError: If level is a name logging does not know
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    root = logging.getLogger()
    if not any(getattr(h, "_pr_context", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pr_context = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(level)
