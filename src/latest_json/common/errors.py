"""Exception hierarchy for latest.json generation."""

from __future__ import annotations

from pathlib import Path


class LatestJsonError(Exception):
    """Base class for all fatal tauri-latest-json errors."""


class ConfigurationError(LatestJsonError):
    """The Tauri config is missing, unparseable, or has no version."""


class NoArtifactsError(LatestJsonError):
    """Scanning finished without producing a single usable artifact."""

    def __init__(self, search_directories: list | None = None) -> None:
        self.search_directories = list(search_directories or [])
        super().__init__(
            "No artifacts found. Make sure the Tauri app was built with "
            "updater artifacts enabled (bundle.createUpdaterArtifacts).",
        )


class PlatformCollisionError(LatestJsonError):
    """A platform key would be overwritten outside the sanctioned cases."""

    def __init__(self, key: str, file_name: str) -> None:
        self.key = key
        self.file_name = file_name
        super().__init__(
            f'Platform entry already exists for key "{key}" '
            f"(artifact: {file_name}). Pass --allow-overwrite-platforms "
            "to replace existing entries.",
        )


class ManifestFormatError(LatestJsonError):
    """An existing latest.json does not have the expected shape."""


class ArtifactNameConflictError(LatestJsonError):
    """Two different bundles would be published under the same file name."""

    def __init__(self, file_name: str, first: Path, second: Path) -> None:
        self.file_name = file_name
        self.first = first
        self.second = second
        super().__init__(
            f'Artifacts share the file name "{file_name}" and would overwrite '
            f"each other in the output directory: {first} and {second}. "
            "Rename one of the bundles before publishing.",
        )
