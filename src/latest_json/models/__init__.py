"""Data model for artifacts and the updater manifest."""

from latest_json.models.artifact import (
    Artifact,
    ScanResult,
    SkippedCandidate,
    SkipReason,
)
from latest_json.models.manifest import Manifest, PlatformEntry
from latest_json.models.types import Arch, BundleType, OperatingSystem

__all__ = [
    "Arch",
    "Artifact",
    "BundleType",
    "Manifest",
    "OperatingSystem",
    "PlatformEntry",
    "ScanResult",
    "SkipReason",
    "SkippedCandidate",
]
