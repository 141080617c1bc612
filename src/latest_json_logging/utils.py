"""Environment-driven logging settings."""

from __future__ import annotations

from pathlib import Path

from latest_json_common.env import read_bool, read_str
from latest_json_common.path import get_log_dir

LOG_LEVEL_ENV = "LATEST_JSON_LOG_LEVEL"
CONSOLE_LOGGING_ENV = "LATEST_JSON_CONSOLE_LOGGING"
FILE_LOGGING_ENV = "LATEST_JSON_FILE_LOGGING"
LOG_DIR_ENV = "LATEST_JSON_LOG_DIR"

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level(default: str = "WARNING") -> str:
    """Return the configured log level name.

    Reads ``LATEST_JSON_LOG_LEVEL``, upper-cases it, and falls back to
    ``default`` when it is unset or not a known level.
    """
    value = read_str(LOG_LEVEL_ENV)
    if value is None:
        return default
    level = value.strip().upper()
    return level if level in VALID_LOG_LEVELS else default


def should_use_console_logging() -> bool:
    """Whether log records should also go to stderr."""
    return read_bool(CONSOLE_LOGGING_ENV, default=False)


def should_use_file_logging() -> bool:
    """Whether log records should be written to a log file (opt-in)."""
    return read_bool(FILE_LOGGING_ENV, default=False)


def get_log_file_path(
    name: str,
    log_dir: str | None = None,
    filename: str | None = None,
) -> str:
    """Return the log file path for ``name``, creating its directory.

    Parameters
    ----------
    name : str
        Log name, used as ``<name>.log`` unless ``filename`` is given
    log_dir : str | None
        Directory override; defaults to ``LATEST_JSON_LOG_DIR`` or
        ``~/.latest-json/log``
    filename : str | None
        Explicit file name

    Returns
    -------
    str
        Absolute path of the log file
    """
    directory = Path(log_dir or read_str(LOG_DIR_ENV) or get_log_dir()).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    return str(directory / (filename or f"{name}.log"))

