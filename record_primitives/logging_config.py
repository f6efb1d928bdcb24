# =============================================================================
# record_primitives/logging_config.py - Package Logger Setup
# =============================================================================
# Modules log through logging.getLogger(__name__). Nothing is configured on
# import; applications that want the package's output on a stream call
# setup_logging() once.
# =============================================================================

from __future__ import annotations

import logging
import sys

from record_primitives.config import get_settings

PACKAGE_LOGGER = "record_primitives"


def setup_logging(
    level: str | None = None,
    format_string: str | None = None,
    stream=None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.
        format_string: Custom format string. Defaults to settings.LOG_FORMAT.
        stream: Stream for the handler. Defaults to sys.stderr.

    Returns:
        The configured "record_primitives" logger
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(PACKAGE_LOGGER)

    # Only add a handler once
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, level.upper()))
    return logger
