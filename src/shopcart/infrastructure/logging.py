"""Logging setup for the command-line entry point.

Library code only ever does ``logging.getLogger(__name__)``; handlers are
attached here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level_name: str = "WARNING") -> None:
    """Attach a stdout handler to the root logger unless one already exists."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, level_name.upper(), logging.WARNING)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Request lines from httpx are noise at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
