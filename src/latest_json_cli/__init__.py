"""Command line interface for tauri-latest-json."""

__version__ = "1.0.0"
