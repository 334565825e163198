"""
Logging setup for the café service.

``setup_logging`` attaches a single console handler to the root logger.
Calling it again (tests build many apps) leaves existing handlers alone.
"""
from __future__ import annotations

import logging


def resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names fall back to INFO."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(level))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
