"""Tests for the CLI logging setup."""

import logging

from epoch_time.log import LOGGER_NAME, CliFormatter, configure_logging


def test_formatter_uses_lowercase_level():
    """Test the ``<level>: <message>`` rendering."""
    record = logging.LogRecord(
        name="epoch_time.batch",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="line %d: %s",
        args=(2, "bad"),
        exc_info=None,
    )
    assert CliFormatter().format(record) == "warning: line 2: bad"


def test_configure_logging_replaces_handlers():
    """Test that repeated configuration keeps a single stderr handler."""
    configure_logging("info")
    logger = configure_logging("debug")

    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, CliFormatter)
    assert logger.propagate is False
