"""Logging setup for the ``et`` command."""

import logging
from logging import Logger

from typing_extensions import override

LOGGER_NAME = "epoch_time"


class CliFormatter(logging.Formatter):
    """Render records as ``<level>: <message>``, the way CLI tools report."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        message = f"{record.levelname.lower()}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def configure_logging(level: str = "WARNING") -> Logger:
    """Configure the package logger with a single stderr handler.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process do not stack output.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(CliFormatter())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    logger.debug("logging configured at %s", level.upper())
    return logger


__all__ = ["CliFormatter", "LOGGER_NAME", "configure_logging"]
