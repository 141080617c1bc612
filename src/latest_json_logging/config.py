"""Logger configuration profiles for tauri-latest-json.

Profiles
--------
cli
    File and/or stderr handlers depending on flags and environment, no
    propagation. Used for the package loggers once the CLI has parsed flags.
lib
    No handlers of its own; records propagate to whoever configured a parent.
test
    DEBUG level (unless ``level`` is given) with propagation so pytest's
    ``caplog`` sees every record.
"""

from __future__ import annotations

import logging
import sys

from latest_json_logging.formatters import ColoredFormatter, SafeFormatter
from latest_json_logging.utils import (
    get_log_file_path,
    get_log_level,
    should_use_console_logging,
    should_use_file_logging,
)

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

PROFILES = ("cli", "lib", "test")


def _level_value(level: str) -> int:
    if level.upper() == "TRACE":
        return TRACE
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def _reset(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.filters.clear()


def configure_logger(
    name: str,
    profile: str = "cli",
    level: str | None = None,
    to_console: bool | None = None,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure the logger ``name`` according to ``profile``.

    Existing handlers and filters on the logger are removed first, so calling
    this repeatedly is safe.

    Parameters
    ----------
    name : str
        Logger name (usually a package name)
    profile : str
        One of ``cli``, ``lib`` or ``test``
    level : str | None
        Level name; defaults to ``LATEST_JSON_LOG_LEVEL`` or WARNING
    to_console : bool | None
        Attach a stderr handler; defaults to ``LATEST_JSON_CONSOLE_LOGGING``
    log_file : str | None
        Attach a file handler writing to this path. Without it a file handler
        is only added when ``LATEST_JSON_FILE_LOGGING`` is set.

    Returns
    -------
    logging.Logger
        The configured logger

    Raises
    ------
    ValueError
        If ``profile`` is unknown
    """
    if profile not in PROFILES:
        msg = f"Unknown profile: {profile!r} (expected one of {', '.join(PROFILES)})"
        raise ValueError(msg)

    logger = logging.getLogger(name)
    _reset(logger)

    if profile == "test":
        logger.setLevel(_level_value(level) if level else logging.DEBUG)
        logger.propagate = True
        return logger

    logger.setLevel(_level_value(level or get_log_level()))

    if profile == "lib":
        logger.propagate = True
        return logger

    # cli
    if to_console is None:
        to_console = should_use_console_logging()
    if to_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ColoredFormatter(use_colors=sys.stderr.isatty()))
        logger.addHandler(console)

    if log_file is None and should_use_file_logging():
        log_file = get_log_file_path("cli")
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(SafeFormatter())
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a library logger.

    Library modules never attach handlers; their records reach whichever
    parent logger the application configured.
    """
    return logging.getLogger(name)
