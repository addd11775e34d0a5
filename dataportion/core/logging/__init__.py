"""Logging for dataportion.

Usage:
    >>> from dataportion.core.logging import get_logger, configure_logging
    >>>
    >>> configure_logging(verbose=2)
    >>> logger = get_logger(__name__)
    >>> logger.debug("selected 5 of 10 rows")
"""

from .config import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    is_configured,
    reset_logging,
)
from .formatters import ConsoleFormatter

__all__ = [
    "get_logger",
    "configure_logging",
    "is_configured",
    "reset_logging",
    "ROOT_LOGGER_NAME",
    "ConsoleFormatter",
]
