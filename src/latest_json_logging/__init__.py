"""Logging setup for tauri-latest-json (latest_json_logging)."""

from latest_json_logging.config import (
    TRACE,
    configure_logger,
    get_logger,
)

__all__ = [
    "TRACE",
    "configure_logger",
    "get_logger",
]
