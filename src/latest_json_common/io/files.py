"""Safe file operations for tauri-latest-json."""

import contextlib
import json
import shutil
import tempfile
from pathlib import Path
from typing import Any

import yaml


class FileOperationError(Exception):
    """Raised when file operations fail."""


def safe_read_yaml(path: Path) -> dict[str, Any]:
    """Safely read YAML file with error handling.

    Parameters
    ----------
    path : Path
        Path to YAML file

    Returns
    -------
    dict[str, Any]
        Parsed YAML data

    Raises
    ------
    FileOperationError
        If file cannot be read or parsed
    """
    try:
        if not path.exists():
            msg = f"YAML file does not exist: {path}"
            raise FileOperationError(msg)

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data if data is not None else {}

    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise FileOperationError(msg) from e
    except OSError as e:
        msg = f"Cannot read YAML file {path}: {e}"
        raise FileOperationError(msg) from e


def safe_read_json(path: Path) -> Any:
    """Safely read JSON file with error handling.

    Parameters
    ----------
    path : Path
        Path to JSON file

    Returns
    -------
    Any
        Parsed JSON data. Callers validate the top-level shape.

    Raises
    ------
    FileOperationError
        If file cannot be read or parsed
    """
    try:
        if not path.exists():
            msg = f"JSON file does not exist: {path}"
            raise FileOperationError(msg)

        with path.open(encoding="utf-8") as f:
            return json.load(f)

    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid JSON in {path}: {e}"
        raise FileOperationError(msg) from e
    except OSError as e:
        msg = f"Cannot read JSON file {path}: {e}"
        raise FileOperationError(msg) from e


def safe_write_json(
    path: Path,
    data: dict[str, Any],
    *,
    sort_keys: bool = False,
) -> None:
    """Write a JSON document atomically.

    The document is pretty-printed with a two-space indent and ends with a
    trailing newline.

    Parameters
    ----------
    path : Path
        Path to JSON file
    data : dict[str, Any]
        Data to write
    sort_keys : bool
        Sort object keys instead of keeping insertion order

    Raises
    ------
    FileOperationError
        If the data cannot be serialized or the file cannot be written
    """
    try:
        content = json.dumps(data, indent=2, sort_keys=sort_keys) + "\n"
    except (TypeError, ValueError) as e:
        msg = f"Cannot serialize JSON for {path}: {e}"
        raise FileOperationError(msg) from e

    atomic_write(path, content)


def atomic_write(path: Path, content: str) -> None:
    """Atomically write content to a file.

    Parameters
    ----------
    path : Path
        Path to write to
    content : str
        Content to write

    Raises
    ------
    FileOperationError
        If file cannot be written
    """
    temp_path = None
    try:
        ensure_dir(path.parent)

        # Write to temporary file first
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            suffix=path.suffix,
            dir=path.parent,
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)

        # Atomic move
        temp_path.replace(path)

    except OSError as e:
        # Clean up temp file if it exists
        if temp_path is not None:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
        msg = f"Cannot write file {path}: {e}"
        raise FileOperationError(msg) from e


def read_text(path: Path, *, strip: bool = False) -> str:
    """Read a UTF-8 text file.

    Raises
    ------
    FileOperationError
        If the file cannot be read or decoded
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read file {path}: {e}"
        raise FileOperationError(msg) from e
    return content.strip() if strip else content


def copy_file(source: Path, destination_dir: Path) -> Path:
    """Copy a file unmodified into a directory, keeping its name.

    Parameters
    ----------
    source : Path
        File to copy
    destination_dir : Path
        Target directory, created if missing

    Returns
    -------
    Path
        Path of the copy

    Raises
    ------
    FileOperationError
        If the directory cannot be created or the copy fails
    """
    ensure_dir(destination_dir)
    destination = destination_dir / source.name
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        msg = f"Cannot copy {source} to {destination}: {e}"
        raise FileOperationError(msg) from e
    return destination


def ensure_dir(path: Path) -> Path:
    """Ensure directory exists, creating it if necessary.

    Parameters
    ----------
    path : Path
        Directory path to ensure

    Returns
    -------
    Path
        The directory path

    Raises
    ------
    FileOperationError
        If directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        return path
    except OSError as e:
        msg = f"Cannot create directory {path}: {e}"
        raise FileOperationError(msg) from e
