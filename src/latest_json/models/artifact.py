"""Discovered build artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from latest_json.models.types import Arch, BundleType, OperatingSystem


@dataclass(frozen=True)
class Artifact:
    """An installer file paired with its detached signature.

    Attributes
    ----------
    os : OperatingSystem
        Target operating system
    arch : Arch
        Canonical target architecture
    bundle_type : BundleType
        Bundle format
    bundle_path : Path
        Absolute path of the installer file
    signature_path : Path
        Path of ``<bundle_path>.sig``; exists when the artifact is built
    file_name : str
        Installer file name, used for the download URL and the copy
    """

    os: OperatingSystem
    arch: Arch
    bundle_type: BundleType
    bundle_path: Path
    signature_path: Path
    file_name: str

    @property
    def label(self) -> str:
        """Short human-readable description, e.g. ``linux-x86_64 (deb)``."""
        return f"{self.os.value}-{self.arch.value} ({self.bundle_type.value})"


class SkipReason(str, Enum):
    """Why a matching file did not become an artifact."""

    MISSING_SIGNATURE = "missing_signature"
    UNKNOWN_ARCH = "unknown_arch"


@dataclass(frozen=True)
class SkippedCandidate:
    """A bundle file that was found but not turned into an artifact."""

    path: Path
    reason: SkipReason

    @property
    def message(self) -> str:
        """Human-readable explanation of the skip."""
        if self.reason is SkipReason.MISSING_SIGNATURE:
            return f"Signature file not found for {self.path.name}, skipping"
        return f"Could not detect architecture for {self.path.name}, skipping"


@dataclass
class ScanResult:
    """Outcome of scanning a Tauri project for bundles."""

    artifacts: list[Artifact] = field(default_factory=list)
    skipped: list[SkippedCandidate] = field(default_factory=list)
    search_directories: list[Path] = field(default_factory=list)
