"""Logging setup for the monitor.

The TUI owns the terminal, so logs normally go to a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO", log_file: Path | str | None = None) -> logging.Handler:
    """Install a single handler on the ``kubesnap`` logger.

    Args:
        level: Log level name or number.
        log_file: Destination file; stderr when omitted.

    Returns:
        The installed handler.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    handler: logging.Handler
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    package_logger = logging.getLogger("kubesnap")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler
