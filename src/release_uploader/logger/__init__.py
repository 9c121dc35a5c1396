"""Logging utilities for release-uploader.

Structured logging with:
- Colored console output, bare messages for INFO
- Optional file rotation using RotatingFileHandler
- Async-safe logging via QueueHandler/QueueListener

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                       Console + File Handlers

Usage:
    >>> from release_uploader.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Uploading %s", path)  # Use %-style formatting

Environment Variables:
    LOG_LEVEL: Override console log level
    RELEASE_UPLOADER_LOG_DIR: Enable file logging into this directory

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from release_uploader.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from release_uploader.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
    update_logger_levels,
)
from release_uploader.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
    "update_logger_levels",
]
