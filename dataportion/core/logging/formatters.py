"""Log formatters for dataportion."""

from __future__ import annotations

import logging


class ConsoleFormatter(logging.Formatter):
    """Compact human-readable formatter.

    Emits ``[LEVEL] module: message`` where the module is the last
    component of the logger name. DEBUG and INFO records drop the level tag
    unless ``show_level`` is set.
    """

    def __init__(self, show_level: bool = False) -> None:
        super().__init__()
        self.show_level = show_level

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        module = record.name.rsplit(".", 1)[-1]
        if self.show_level or record.levelno >= logging.WARNING:
            text = f"[{record.levelname}] {module}: {message}"
        else:
            text = f"{module}: {message}"
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text
