"""File IO helpers."""

from .files import (
    FileOperationError,
    atomic_write,
    copy_file,
    ensure_dir,
    read_text,
    safe_read_json,
    safe_read_yaml,
    safe_write_json,
)

__all__ = [
    "FileOperationError",
    "atomic_write",
    "copy_file",
    "ensure_dir",
    "read_text",
    "safe_read_json",
    "safe_read_yaml",
    "safe_write_json",
]
