"""Merging discovered artifacts into the updater manifest."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

from latest_json.common.errors import PlatformCollisionError
from latest_json.discovery.scanner import read_signature
from latest_json.manifest.keys import (
    UNIVERSAL_DARWIN_KEYS,
    get_platform_keys,
    is_universal_darwin,
    is_windows_basic_key,
    prefers_over_existing,
)
from latest_json.manifest.store import load_existing_manifest
from latest_json.models.artifact import Artifact
from latest_json.models.manifest import Manifest, PlatformEntry
from latest_json_logging import get_logger

logger = get_logger(__name__)

# Longest first so "{{version}}" and "${version}" never leave stray characters.
VERSION_PLACEHOLDERS = ("{{version}}", "${version}", "{version}")


def apply_version_placeholder(base_url: str, version: str) -> str:
    """Substitute every supported version placeholder in ``base_url``."""
    resolved = base_url
    for placeholder in VERSION_PLACEHOLDERS:
        resolved = resolved.replace(placeholder, version)
    return resolved


def build_download_url(base_url: str, version: str, file_name: str) -> str:
    """Download URL of ``file_name`` under ``base_url``.

    >>> build_download_url("https://cdn.example.com/{version}", "1.2.0", "App.msi")
    'https://cdn.example.com/1.2.0/App.msi'
    """
    base = apply_version_placeholder(base_url, version)
    if not base.endswith("/"):
        base = f"{base}/"
    return f"{base}{file_name}"


def format_pub_date(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``...T12:00:00.000Z``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _should_write(
    platforms: dict[str, PlatformEntry],
    key: str,
    entry: PlatformEntry,
    artifact: Artifact,
    allow_overwrite: bool,
) -> bool:
    """Apply the collision policy for a single key.

    Raises
    ------
    PlatformCollisionError
        When ``key`` is taken and none of the sanctioned cases apply
    """
    if allow_overwrite or key not in platforms:
        return True

    if platforms[key] == entry:
        return False

    if is_universal_darwin(artifact) and key in UNIVERSAL_DARWIN_KEYS:
        logger.debug("Keeping existing %s over universal %s", key, artifact.file_name)
        return False

    if is_windows_basic_key(artifact, key):
        if prefers_over_existing(artifact):
            logger.debug("Preferring MSI %s for %s", artifact.file_name, key)
            return True
        logger.debug("Keeping existing %s over %s", key, artifact.file_name)
        return False

    raise PlatformCollisionError(key, artifact.file_name)


def generate_manifest(
    artifacts: Iterable[Artifact],
    version: str,
    base_url: str,
    output_dir: Path,
    notes: str | None = None,
    allow_overwrite: bool = False,
    now: datetime | None = None,
) -> Manifest:
    """Build the manifest for ``artifacts`` on top of any existing one.

    Parameters
    ----------
    artifacts : Iterable[Artifact]
        Artifacts in discovery order
    version : str
        Release version
    base_url : str
        Download base URL; may contain ``{version}``, ``${version}`` or
        ``{{version}}``
    output_dir : Path
        Directory that holds (or will hold) ``latest.json``
    notes : str | None
        Release notes; when empty, notes of the existing manifest are kept
    allow_overwrite : bool
        Replace existing entries unconditionally
    now : datetime | None
        Publication time; defaults to the current time

    Returns
    -------
    Manifest
        New manifest. Nothing is written to disk.

    Raises
    ------
    PlatformCollisionError
        If an artifact would replace an existing entry unexpectedly
    FileOperationError
        If a signature file cannot be read
    """
    existing = load_existing_manifest(output_dir)
    platforms: dict[str, PlatformEntry] = dict(existing.platforms) if existing else {}

    for artifact in artifacts:
        entry = PlatformEntry(
            url=build_download_url(base_url, version, artifact.file_name),
            signature=read_signature(artifact),
        )
        for key in get_platform_keys(artifact):
            if _should_write(platforms, key, entry, artifact, allow_overwrite):
                platforms[key] = entry

    if notes:
        resolved_notes = notes
    elif existing is not None and existing.notes:
        resolved_notes = existing.notes
    else:
        resolved_notes = None

    return Manifest(
        version=version,
        pub_date=format_pub_date(now or datetime.now(tz=timezone.utc)),
        platforms=platforms,
        notes=resolved_notes,
    )
