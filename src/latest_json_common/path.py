"""Path utilities for consistent path handling across tauri-latest-json."""

from __future__ import annotations

from pathlib import Path
from typing import overload

from latest_json_common.constants import (
    LOG_SUBDIR,
    TOOL_HOME_DIR,
    USER_CONFIG_DIR,
    USER_CONFIG_FILE,
)

_CONFIG_DIR = ".config"


def get_tool_home() -> Path:
    """Get the tool home directory (~/.latest-json).

    Returns
    -------
    Path
        The tool home directory path
    """
    return Path.home() / TOOL_HOME_DIR


def get_log_dir() -> Path:
    """Get the default log directory (~/.latest-json/log).

    Returns
    -------
    Path
        The log directory path
    """
    return get_tool_home() / LOG_SUBDIR


def get_user_config_path() -> Path:
    """Get path to the user-level configuration file."""
    return Path.home() / _CONFIG_DIR / USER_CONFIG_DIR / USER_CONFIG_FILE


@overload
def normalize_path(
    path: str,
    *,
    strict: bool = False,
    return_path: bool = False,
) -> str: ...


@overload
def normalize_path(
    path: Path,
    *,
    strict: bool = False,
    return_path: bool = True,
) -> Path: ...


def normalize_path(
    path: str | Path,
    *,
    strict: bool = False,
    return_path: bool | None = None,
) -> str | Path:
    """Normalize file paths to ensure consistent comparison and logging.

    The helper resolves ``~`` (user home), collapses redundant separators, and
    resolves symlinks when appropriate. Non-existent paths are returned
    expanded but otherwise untouched unless ``strict=True``.

    Parameters
    ----------
    path : str | Path
        The path to normalize.
    strict : bool, optional
        When True, resolve the path even if it does not exist yet.
    return_path : bool | None, optional
        ``True`` returns a ``Path`` object, ``False`` returns ``str``. When
        ``None`` (default) the return type matches the input type.

    Returns
    -------
    str | Path
        Normalized path with symlinks resolved when available.
    """
    if path is None or path == "":
        return path

    input_was_str = isinstance(path, str)
    path_obj = Path(path).expanduser()

    if strict or path_obj.exists():
        path_obj = path_obj.resolve(strict=False)

    if return_path is None:
        return_path = not input_was_str

    return path_obj if return_path else str(path_obj)
