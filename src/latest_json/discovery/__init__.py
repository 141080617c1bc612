"""Artifact discovery in Tauri build output."""

from latest_json.discovery.scanner import (
    check_file_names,
    find_artifacts,
    get_search_directories,
    read_signature,
    signature_path_for,
)

__all__ = [
    "check_file_names",
    "find_artifacts",
    "get_search_directories",
    "read_signature",
    "signature_path_for",
]
