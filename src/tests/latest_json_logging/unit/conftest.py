"""Fixtures for latest_json_logging unit tests."""

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def clean_logger(request) -> Generator[logging.Logger, None, None]:
    """Create a clean logger for testing.

    Yields
    ------
    logging.Logger
        Clean logger instance
    """
    logger_name = f"test.unit.{request.node.name}.{id(request)}"
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()
    logger.filters.clear()
    logger.setLevel(logging.DEBUG)
    logger.propagate = True

    yield logger

    # Clean up
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.filters.clear()
    logger.propagate = False


def make_record(level: int = logging.INFO, msg: str = "test", args=()) -> logging.LogRecord:
    """Build a LogRecord for formatter tests."""
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="/path/to/test.py",
        lineno=42,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.fixture
def record_factory():
    """Provide make_record to tests."""
    return make_record
