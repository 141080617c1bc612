"""Constants and enums for the tauri-latest-json CLI."""

from enum import Enum


class LogLevel(str, Enum):
    """Supported log levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


ALL_LOG_LEVELS = tuple(LogLevel)


class ExitCode:
    """Exit codes for CLI operations.

    Every fatal condition, including "no artifacts found" and usage errors
    such as a missing required option, exits with ``GENERAL_ERROR``.
    """

    GENERAL_ERROR = 1


class Icons:
    """Unicode icons for CLI output.

    Reserved for errors and warnings; ordinary messages use colors instead.
    """

    ERROR = "❌"
    WARNING = "⚠️"
    ARROW_RIGHT = "→"


class EnvVars:
    """Environment variables backing CLI options."""

    TAURI_PROJECT = "LATEST_JSON_TAURI_PROJECT"
    OUTPUT_DIR = "LATEST_JSON_OUTPUT_DIR"
    BASE_URL = "LATEST_JSON_BASE_URL"
    NOTES = "LATEST_JSON_NOTES"


# Packages whose loggers the CLI configures
LOGGING_PACKAGES = ("latest_json", "latest_json_cli", "latest_json_common")
