"""Release version lookup from the Tauri config file.

The version may be written inline (``"version": "1.2.0"``) or point at a JSON
file holding it (``"version": "../package.json"``), in which case that file's
``version`` field is used. Tauri v2 keeps it at the top level; v1 configs use
``package.version``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from latest_json.common.errors import ConfigurationError
from latest_json_common.config import ProjectLayout
from latest_json_common.io import FileOperationError, safe_read_json
from latest_json_logging import get_logger

logger = get_logger(__name__)

VERSION_FILE_SUFFIX = ".json"


def _read_json_object(path: Path, what: str) -> dict[str, Any]:
    try:
        data = safe_read_json(path)
    except FileOperationError as e:
        msg = f"Cannot load {what}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(data, dict):
        msg = f"{what} must contain a JSON object: {path}"
        raise ConfigurationError(msg)
    return data


def _optional_str(value: Any, field_name: str, path: Path) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f'"{field_name}" in {path} must be a string'
        raise ConfigurationError(msg)
    return value


def read_tauri_config(
    project_root: Path,
    layout: ProjectLayout | None = None,
) -> dict[str, Any]:
    """Load and shape-check the Tauri config of ``project_root``.

    Only ``version``, ``package.version`` and ``identifier`` are checked;
    other fields are returned untouched.

    Raises
    ------
    ConfigurationError
        If the file is missing, unparseable, or a checked field has the wrong type
    """
    layout = layout or ProjectLayout()
    path = layout.config_path(project_root)
    config = _read_json_object(path, "Tauri config")

    _optional_str(config.get("version"), "version", path)
    _optional_str(config.get("identifier"), "identifier", path)
    package = config.get("package")
    if package is not None:
        if not isinstance(package, dict):
            msg = f'"package" in {path} must be an object'
            raise ConfigurationError(msg)
        _optional_str(package.get("version"), "package.version", path)

    return config


def _read_version_file(relative: str, config_dir: Path) -> str:
    path = (config_dir / relative).resolve()
    data = _read_json_object(path, "version file")
    version = data.get("version")
    if not isinstance(version, str):
        msg = f'"version" in {path} must be a string'
        raise ConfigurationError(msg)
    logger.debug("Read version %s from %s", version, path)
    return version


def _resolve(value: str | None, config_dir: Path) -> str | None:
    if not value:
        return None
    if value.endswith(VERSION_FILE_SUFFIX):
        return _read_version_file(value, config_dir)
    return value


def resolve_version(
    project_root: Path,
    layout: ProjectLayout | None = None,
) -> str:
    """Return the release version declared by the Tauri project.

    Parameters
    ----------
    project_root : Path
        Tauri project directory
    layout : ProjectLayout | None
        Where the Tauri config lives; defaults apply when None

    Returns
    -------
    str
        Top-level ``version`` if set, else ``package.version``, with
        ``*.json`` values followed to the referenced file

    Raises
    ------
    ConfigurationError
        If the config cannot be read or no version is declared
    """
    layout = layout or ProjectLayout()
    config = read_tauri_config(project_root, layout)
    config_dir = layout.config_path(project_root).parent

    package = config.get("package") or {}
    version = _resolve(config.get("version"), config_dir) or _resolve(
        package.get("version"),
        config_dir,
    )
    if not version:
        msg = (
            f"Could not find version in {layout.config_file}. "
            'Please ensure "version" is set.'
        )
        raise ConfigurationError(msg)
    return version
