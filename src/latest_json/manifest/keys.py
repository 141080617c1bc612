"""Platform keys under which an artifact is published."""

from __future__ import annotations

from latest_json.models.artifact import Artifact
from latest_json.models.types import Arch, BundleType, OperatingSystem

# A universal macOS bundle answers lookups for both concrete architectures.
UNIVERSAL_DARWIN_KEYS: tuple[str, ...] = (
    "darwin-x86_64",
    "darwin-aarch64",
    "darwin-x86_64-app",
    "darwin-aarch64-app",
)


def is_universal_darwin(artifact: Artifact) -> bool:
    return artifact.os is OperatingSystem.DARWIN and artifact.arch is Arch.UNIVERSAL


def basic_key(artifact: Artifact) -> str:
    """``<os>-<arch>``"""
    return f"{artifact.os.value}-{artifact.arch.value}"


def extended_key(artifact: Artifact) -> str:
    """``<os>-<arch>-<bundle>``"""
    return f"{basic_key(artifact)}-{artifact.bundle_type.value}"


def get_platform_keys(artifact: Artifact) -> list[str]:
    """Return every manifest key ``artifact`` should be registered under.

    Universal macOS bundles fan out to the basic and ``-app`` keys of both
    ``x86_64`` and ``aarch64``; every other artifact gets its basic and its
    bundle-qualified key.
    """
    if is_universal_darwin(artifact):
        return list(UNIVERSAL_DARWIN_KEYS)
    return [basic_key(artifact), extended_key(artifact)]


def is_windows_basic_key(artifact: Artifact, key: str) -> bool:
    return artifact.os is OperatingSystem.WINDOWS and key == basic_key(artifact)


def prefers_over_existing(artifact: Artifact) -> bool:
    """MSI installers win the shared ``windows-<arch>`` key over NSIS."""
    return artifact.bundle_type is BundleType.MSI
