"""Package-wide logging for keycount.

Every module logs through a child of the ``keycount`` logger, which owns a
single handler. Diagnostics (skipped lines, fatal input errors, run summary)
go to stderr so that stdout carries nothing but the rendered totals.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "keycount"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the handler on the ``keycount`` logger.

    Only the first call has an effect; later calls return immediately so that
    repeated imports never stack handlers.

    Args:
        level: Initial level for the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler, a stderr ``StreamHandler`` when omitted.
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Records still reach the root logger so pytest's caplog can see them
    package_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, usually a module's ``__name__``.

    The returned logger has no handler or level of its own; it defers to the
    ``keycount`` logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log per-line detail (``--verbose``)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to the default INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so the next call reinstalls them.

    Intended for tests.
    """
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
