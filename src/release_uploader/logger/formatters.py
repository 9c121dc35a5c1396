"""Logging formatters for console output.

- ColoredConsoleFormatter: Adds ANSI color codes to log levels
- HybridConsoleFormatter: Message only for INFO, structured for others

INFO lines are the user facing progress of an upload run, so they are
printed bare; anything else carries timestamp, logger and level.
"""

import logging

from release_uploader.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with ANSI color support for different log levels."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name.

        The record's levelname is swapped for the colored variant only
        for the duration of the call.

        Args:
            record: The log record to format

        Returns:
            Formatted log message with ANSI color codes for the level name

        """
        if record.levelname in LOG_COLORS:
            color = LOG_COLORS[record.levelname]
            reset = LOG_COLORS["RESET"]

            original_levelname = record.levelname
            record.levelname = f"{color}{record.levelname}{reset}"
            try:
                return super().format(record)
            finally:
                record.levelname = original_levelname

        return super().format(record)


class HybridConsoleFormatter(logging.Formatter):
    """Console formatter with simple format for INFO, structured for others.

    Example Output:
        INFO:     "Uploading dist/app.tar.gz to app.tar.gz in release v1.0.0."
        WARNING:  "12:30:45 - release_uploader - WARNING - No token"
        ERROR:    "12:30:45 - release_uploader - ERROR - Upload failed"

    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        """Initialize hybrid formatter with structured format template.

        Args:
            fmt: Format string for structured messages
            datefmt: Date format string for timestamps

        """
        super().__init__(fmt, datefmt)
        self._colored_formatter = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        """Format log record using simple or structured format by level.

        Args:
            record: The log record to format

        Returns:
            Formatted message (simple for INFO, structured for others)

        """
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._colored_formatter.format(record)
