"""Reading and writing ``latest.json``."""

from __future__ import annotations

from pathlib import Path

from latest_json.common.errors import ManifestFormatError
from latest_json.models.manifest import Manifest
from latest_json_common.io import FileOperationError, safe_read_json, safe_write_json
from latest_json_logging import get_logger

logger = get_logger(__name__)

MANIFEST_FILE_NAME = "latest.json"


def manifest_path(output_dir: Path) -> Path:
    """Location of ``latest.json`` inside ``output_dir``."""
    return output_dir / MANIFEST_FILE_NAME


def load_existing_manifest(output_dir: Path) -> Manifest | None:
    """Load a previously published manifest, if there is a usable one.

    Returns None when the file is missing, is not valid JSON, or does not
    have the manifest shape. The latter two are logged as warnings since the
    file will be replaced on the next write.
    """
    path = manifest_path(output_dir)
    if not path.exists():
        return None

    try:
        return Manifest.from_dict(safe_read_json(path))
    except (FileOperationError, ManifestFormatError) as e:
        logger.warning("Ignoring existing %s: %s", path, e)
        return None


def write_manifest(manifest: Manifest, output_dir: Path) -> Path:
    """Write ``manifest`` to ``<output_dir>/latest.json``, replacing any file.

    Returns
    -------
    Path
        Path of the written file

    Raises
    ------
    FileOperationError
        If the file cannot be written
    """
    path = manifest_path(output_dir)
    safe_write_json(path, manifest.to_dict())
    logger.info("Wrote %s with %d platform entries", path, len(manifest.platforms))
    return path
