"""
Logging configuration for DStat.

Diagnostics go to stderr through a rich handler; they are silent unless
``--debug`` is given. The non-fatal error log is a separate channel, see
``dstat.errors_log``.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dstat"


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configure the ``dstat`` logger with a rich handler on stderr.

    Args:
        debug: Enable DEBUG level logging

    Returns:
        Configured logger instance for dstat
    """
    level = logging.DEBUG if debug else logging.WARNING

    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=debug,
        markup=False,
        show_time=debug,
        show_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(LOGGER_NAME)
    # Repeated invocations in one process (tests, embedding) must not stack handlers
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'dstat.scanner')
              If None, returns the root dstat logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
