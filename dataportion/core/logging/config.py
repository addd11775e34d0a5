"""Logging configuration for dataportion.

The package logger is silent until :func:`configure_logging` is called.
Library modules only ever call :func:`get_logger`.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .formatters import ConsoleFormatter

ROOT_LOGGER_NAME = "dataportion"

# verbose level -> logging level
_VERBOSITY = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}

_handler: logging.Handler | None = None

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``dataportion`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The configured :class:`logging.Logger`.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    verbose: int = 1,
    stream: TextIO | None = None,
    show_level: bool = False,
) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again replaces the previous handler.

    Args:
        verbose: 0 = warnings only, 1 = info, 2 or more = debug.
        stream: Output stream, defaults to ``sys.stderr``.
        show_level: Prefix every record with its level name.

    Returns:
        The package logger.
    """
    global _handler

    if verbose < 0:
        raise ValueError(f"verbose must be >= 0, got {verbose}")
    level = _VERBOSITY.get(verbose, logging.DEBUG)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(ConsoleFormatter(show_level=show_level))
    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger


def is_configured() -> bool:
    """Whether :func:`configure_logging` installed a handler."""
    return _handler is not None


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`."""
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
