"""
Logging configuration for the pizza-order app.

Textual owns the terminal while the app runs, so records go to a file.

Usage:
    from pizza_order.logging_config import setup_logging
    setup_logging()  # Call once at application startup
"""

from __future__ import annotations

import logging
from pathlib import Path

from pizza_order.config import LOG_LEVEL, LOG_PATH

_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str | None = None, log_path: str | None = None) -> None:
    """Configure the package logger to write to ``log_path``."""
    level = (level or LOG_LEVEL).upper()
    if level not in _VALID_LEVELS:
        level = "INFO"
    numeric_level = getattr(logging, level)

    log_file = Path(log_path or LOG_PATH)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        filename=log_file,
        encoding="utf-8",
    )
    logging.getLogger("pizza_order").setLevel(numeric_level)

    if level != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured at %s level file=%s", level, log_file)
