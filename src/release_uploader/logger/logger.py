"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get a logger, initializing the root logger on first use
- update_logger_levels(): Apply levels loaded from settings.conf
- flush_all_handlers(): Ensure pending records are written
- clear_logger_state(): Reset global logger state for testing
"""

import atexit
import contextlib
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

from release_uploader.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_NAME,
)
from release_uploader.logger.handlers import (
    ROOT_LOGGER_NAME,
    setup_root_logger,
)
from release_uploader.logger.state import get_state

# Setting this enables the rotating file log inside the given directory
ENV_LOG_DIR = "RELEASE_UPLOADER_LOG_DIR"
# Overrides the console level, mostly useful when debugging a workflow
ENV_LOG_LEVEL = "LOG_LEVEL"


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load bootstrap console level, file level and file path.

    These are used while the root logger is created; settings.conf
    values are applied later through update_logger_levels().

    Returns:
        Tuple of (console_level, file_level, log_path or None)

    """
    console_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL).upper()
    env_log_dir = os.getenv(ENV_LOG_DIR)
    log_path = (
        Path(env_log_dir).expanduser() / LOG_FILE_NAME if env_log_dir else None
    )
    return console_level, DEFAULT_LOG_LEVEL, log_path


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener.

    Waits (bounded) for the queue to drain, then flushes every handler.
    """
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    deadline = time.time() + 5.0
    while not state.log_queue.empty() and time.time() < deadline:
        time.sleep(0.01)
    # The listener may still hold the last dequeued record
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the named logger.

    The root ``release_uploader`` logger is initialized exactly once;
    child loggers propagate to it.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level override
        file_level: File log level override
        log_file: Log file override; file logging is off when no path is
            given here or through RELEASE_UPLOADER_LOG_DIR

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger, initializing the logging system if needed.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.info("Uploading %s", path)

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured logger instance

    """
    return setup_logging(name=name)


def update_logger_levels(console_level: str, file_level: str) -> None:
    """Apply handler levels loaded from settings.conf.

    The LOG_LEVEL environment variable still wins for the console.

    Args:
        console_level: Console log level name
        file_level: File log level name

    """
    state = get_state()
    if state.queue_listener is None:
        return

    console_level = os.getenv(ENV_LOG_LEVEL, console_level).upper()
    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(getattr(logging, file_level.upper(), logging.INFO))
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(getattr(logging, console_level, logging.INFO))

    state.config_applied = True


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and resets the state flags.
    Intended for test teardown only.
    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
