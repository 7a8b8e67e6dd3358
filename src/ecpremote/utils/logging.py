"""Logging setup utilities for ecpremote.

Configures the ``ecpremote`` logger hierarchy from the logging section
of the settings. The user-facing activity log lives in
``ecpremote.utils.activity`` and is independent of this.
"""

from __future__ import annotations

import logging
import sys

from ecpremote.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the ecpremote application.

    Sets up the package logger with the configured level and format, a
    stderr handler, and an optional file handler. Calling it again
    replaces the handlers installed by the previous call.

    Args:
        config: Logging configuration. If None, uses defaults
                (WARNING level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("ecpremote")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.WARNING))

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at %s level", config.level)
