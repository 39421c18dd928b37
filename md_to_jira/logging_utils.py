"""Logging setup for the md-to-jira command line."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(log_level: int | str) -> logging.Logger:
    """Configure the root logger with a single stderr handler.

    Args:
        log_level: Numeric logging level or level name (e.g. ``"DEBUG"``).
            Unknown names fall back to ``WARNING``.

    Returns:
        logging.Logger: The configured root logger.
    """
    resolved_level = (
        log_level
        if isinstance(log_level, int)
        else getattr(logging, str(log_level).upper(), logging.WARNING)
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    return root_logger
