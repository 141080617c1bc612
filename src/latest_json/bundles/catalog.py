"""Catalog of the installer formats produced by the Tauri bundler.

Each packaging toolchain names its output differently, so every descriptor
carries its own file pattern and architecture extractor instead of relying on
a single universal regex.
"""

from __future__ import annotations

import platform
import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from latest_json.bundles.arch import host_arch, normalize_arch
from latest_json.models.types import Arch, BundleType, OperatingSystem

ArchExtractor = Callable[[str, Path], Arch | None]

_APPIMAGE_ARCH = re.compile(r"_([^_]+)\.AppImage$")
_DEB_ARCH = re.compile(r"_([^_]+)\.deb$")
# name-version-release.arch.rpm
_RPM_ARCH = re.compile(r"\.([^.]+)\.rpm$")
_APP_ARCH = re.compile(r"_([^_]+)\.app\.tar\.gz$")
# Name_version_arch-setup.exe
_NSIS_ARCH = re.compile(r"_([^_]+)-setup\.exe$")
# Name_version_arch_lang.msi
_MSI_ARCH = re.compile(r"_([^_]+)_[^_]+\.msi$")

# Checked against the full path, in order
_DARWIN_TRIPLES: tuple[tuple[str, Arch], ...] = (
    ("universal-apple-darwin", Arch.UNIVERSAL),
    ("aarch64-apple-darwin", Arch.AARCH64),
    ("x86_64-apple-darwin", Arch.X86_64),
)

# Checked against the file name, in order
_DARWIN_NAME_MARKERS: tuple[tuple[tuple[str, ...], Arch], ...] = (
    (("universal",), Arch.UNIVERSAL),
    (("aarch64", "arm64"), Arch.AARCH64),
    (("x86_64", "x64"), Arch.X86_64),
)


@dataclass(frozen=True)
class BundleDescriptor:
    """Static description of one bundle format.

    Attributes
    ----------
    os : OperatingSystem
        Operating system the bundle installs on
    bundle_type : BundleType
        Bundle format
    search_subdir : str
        Directory under ``bundle/`` the bundler writes this format to
    pattern : re.Pattern[str]
        Matches installer file names (never their ``.sig`` companions)
    extract_arch : ArchExtractor
        ``(file_name, file_path) -> Arch | None``
    """

    os: OperatingSystem
    bundle_type: BundleType
    search_subdir: str
    pattern: re.Pattern[str]
    extract_arch: ArchExtractor

    def matches(self, file_name: str) -> bool:
        return self.pattern.search(file_name) is not None


def _token_extractor(regex: re.Pattern[str]) -> ArchExtractor:
    def extract(file_name: str, file_path: Path) -> Arch | None:
        match = regex.search(file_name)
        return normalize_arch(match.group(1)) if match else None

    return extract


def _running_on_macos() -> bool:
    return platform.system() == "Darwin"


def extract_macos_arch(file_name: str, file_path: Path) -> Arch | None:
    """Find the architecture of a ``.app.tar.gz`` updater bundle.

    Cross-compiled bundles live under ``target/<triple>/``, so the path is the
    most reliable signal. Then the file name is searched for markers. When
    neither says anything and we run on macOS, the bundle is assumed to have
    been built for this machine.
    """
    path_str = file_path.as_posix()
    for triple, arch in _DARWIN_TRIPLES:
        if triple in path_str:
            return arch

    for markers, arch in _DARWIN_NAME_MARKERS:
        if any(marker in file_name for marker in markers):
            return arch

    match = _APP_ARCH.search(file_name)
    if match:
        arch = normalize_arch(match.group(1))
        if arch is not None:
            return arch

    # Heuristic: a native build has no marker at all.
    if _running_on_macos():
        return host_arch()
    return None


BUNDLE_CATALOG: tuple[BundleDescriptor, ...] = (
    BundleDescriptor(
        os=OperatingSystem.LINUX,
        bundle_type=BundleType.APPIMAGE,
        search_subdir="appimage",
        pattern=re.compile(r"\.AppImage$"),
        extract_arch=_token_extractor(_APPIMAGE_ARCH),
    ),
    BundleDescriptor(
        os=OperatingSystem.LINUX,
        bundle_type=BundleType.DEB,
        search_subdir="deb",
        pattern=re.compile(r"\.deb$"),
        extract_arch=_token_extractor(_DEB_ARCH),
    ),
    BundleDescriptor(
        os=OperatingSystem.LINUX,
        bundle_type=BundleType.RPM,
        search_subdir="rpm",
        pattern=re.compile(r"\.rpm$"),
        extract_arch=_token_extractor(_RPM_ARCH),
    ),
    BundleDescriptor(
        os=OperatingSystem.DARWIN,
        bundle_type=BundleType.APP,
        search_subdir="macos",
        pattern=re.compile(r"\.app\.tar\.gz$"),
        extract_arch=extract_macos_arch,
    ),
    BundleDescriptor(
        os=OperatingSystem.WINDOWS,
        bundle_type=BundleType.NSIS,
        search_subdir="nsis",
        pattern=re.compile(r"-setup\.exe$"),
        extract_arch=_token_extractor(_NSIS_ARCH),
    ),
    BundleDescriptor(
        os=OperatingSystem.WINDOWS,
        bundle_type=BundleType.MSI,
        search_subdir="msi",
        pattern=re.compile(r"\.msi$"),
        extract_arch=_token_extractor(_MSI_ARCH),
    ),
)
