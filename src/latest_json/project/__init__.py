"""Tauri project configuration."""

from latest_json.project.version import read_tauri_config, resolve_version

__all__ = ["read_tauri_config", "resolve_version"]
