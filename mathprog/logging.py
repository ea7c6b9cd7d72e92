"""Centralized logging configuration for mathprog.

Every module logs through a child of the ``mathprog`` logger obtained with
``get_logger(__name__)``:

- ``mathprog.model.builder`` logs each successful mutation at DEBUG;
- ``mathprog.parameters.configuration`` logs each changed parameter at DEBUG;
- ``mathprog.solver`` logs each hand-off at DEBUG and each outcome at INFO.

``enable_debug_logging()`` therefore traces how a program was assembled.
Programs are referred to in messages through ``program_label``.
"""

import logging
import sys
from typing import Any, Optional

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False

_ROOT_LOGGER_NAME = "mathprog"


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root mathprog logger with a single handler.

    Repeated calls are ignored until ``reset_logging`` is called.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to StreamHandler on stdout).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Let records reach the root logger so pytest's caplog sees them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the mathprog root configuration.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance with level NOTSET, so the root level applies.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all mathprog loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


def program_label(mp: Any) -> str:
    """Short label of a program for log messages.

    Example: ``'OneFourThree' [0 bool, 2 int, 0 real, 3 constraints]``.
    Counts are those reported by ``mp.dimension``, so a view over a program
    is labelled as seen through it.

    Args:
        mp: Any ``ReadableMP``.
    """
    dim = mp.dimension
    return (
        f"'{mp.name}' [{dim.bools} bool, {dim.ints} int, {dim.reals} real, "
        f"{dim.constraints} constraints]"
    )


setup_root_logger()
