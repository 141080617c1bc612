"""Discovery of signed updater bundles in a Tauri build tree.

Layout scanned (``build_dir`` defaults to ``src-tauri``)::

    <project>/<build_dir>/target/release/bundle/<subdir>/*
    <project>/<build_dir>/target/<triple>/release/bundle/<subdir>/*

Missing directories and unusable files are not errors: missing directories
contribute nothing, and files without a signature or a recognizable
architecture are reported as skipped candidates.
"""

from __future__ import annotations

from pathlib import Path

from latest_json.bundles.catalog import BUNDLE_CATALOG, BundleDescriptor
from latest_json.common.errors import ArtifactNameConflictError
from latest_json.models.artifact import (
    Artifact,
    ScanResult,
    SkippedCandidate,
    SkipReason,
)
from latest_json_common.config import ProjectLayout
from latest_json_common.io import read_text
from latest_json_logging import get_logger

logger = get_logger(__name__)

SIGNATURE_SUFFIX = ".sig"

# Profile directories directly under target/; anything else is a target triple.
_PROFILE_DIRS = frozenset({"release", "debug"})


def _bundle_dir(profile_root: Path) -> Path:
    return profile_root / "release" / "bundle"


def get_search_directories(
    project_root: Path,
    layout: ProjectLayout | None = None,
) -> list[Path]:
    """List the bundle directories to scan, default root first.

    Parameters
    ----------
    project_root : Path
        Tauri project directory
    layout : ProjectLayout | None
        Where the project keeps its build output; defaults apply when None

    Returns
    -------
    list[Path]
        ``target/release/bundle`` followed by ``target/<triple>/release/bundle``
        for each target triple with bundle output, sorted by triple name.
        The default root is listed even when it does not exist.
    """
    layout = layout or ProjectLayout()
    target_dir = layout.target_dir(project_root)

    candidates = [_bundle_dir(target_dir)]
    if target_dir.is_dir():
        for entry in sorted(target_dir.iterdir(), key=lambda p: p.name):
            if entry.name in _PROFILE_DIRS or not entry.is_dir():
                continue
            bundle_dir = _bundle_dir(entry)
            if bundle_dir.is_dir():
                candidates.append(bundle_dir)

    directories: list[Path] = []
    seen: set[Path] = set()
    for candidate in candidates:
        resolved = candidate.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        directories.append(candidate)
    return directories


def _find_files(directory: Path, descriptor: BundleDescriptor) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        entry
        for entry in directory.iterdir()
        if entry.is_file() and descriptor.matches(entry.name)
    )


def signature_path_for(bundle_path: Path) -> Path:
    """Path of the detached signature next to ``bundle_path``."""
    return bundle_path.with_name(bundle_path.name + SIGNATURE_SUFFIX)


def find_artifacts(
    project_root: Path,
    layout: ProjectLayout | None = None,
) -> ScanResult:
    """Scan a Tauri project for signed updater bundles.

    Artifacts come out in search-directory order, then catalog order, then
    file name order. A file reachable from several search directories is only
    considered once.

    Parameters
    ----------
    project_root : Path
        Tauri project directory
    layout : ProjectLayout | None
        Project layout; defaults apply when None

    Returns
    -------
    ScanResult
        Discovered artifacts, skipped candidates and the directories searched
    """
    result = ScanResult(search_directories=get_search_directories(project_root, layout))
    processed: set[Path] = set()

    for root in result.search_directories:
        for descriptor in BUNDLE_CATALOG:
            for file_path in _find_files(root / descriptor.search_subdir, descriptor):
                resolved = file_path.resolve()
                if resolved in processed:
                    continue
                processed.add(resolved)

                candidate = _inspect(file_path.absolute(), descriptor)
                if isinstance(candidate, SkippedCandidate):
                    logger.debug(
                        "Skipped %s (%s)", candidate.path, candidate.reason.value
                    )
                    result.skipped.append(candidate)
                else:
                    logger.debug("Found %s: %s", candidate.label, candidate.bundle_path)
                    result.artifacts.append(candidate)

    return result


def _inspect(
    file_path: Path,
    descriptor: BundleDescriptor,
) -> Artifact | SkippedCandidate:
    signature_path = signature_path_for(file_path)
    if not signature_path.is_file():
        return SkippedCandidate(path=file_path, reason=SkipReason.MISSING_SIGNATURE)

    arch = descriptor.extract_arch(file_path.name, file_path)
    if arch is None:
        return SkippedCandidate(path=file_path, reason=SkipReason.UNKNOWN_ARCH)

    return Artifact(
        os=descriptor.os,
        arch=arch,
        bundle_type=descriptor.bundle_type,
        bundle_path=file_path,
        signature_path=signature_path,
        file_name=file_path.name,
    )


def read_signature(artifact: Artifact) -> str:
    """Read an artifact's signature, stripped of surrounding whitespace.

    Raises
    ------
    FileOperationError
        If the signature file cannot be read
    """
    return read_text(artifact.signature_path, strip=True)


def check_file_names(artifacts: list[Artifact]) -> None:
    """Ensure no two artifacts would land on the same output file.

    Artifacts are published flat, as ``<output_dir>/<file_name>``, so bundles
    from different target roots that share a name (macOS ``.app.tar.gz``
    archives carry no architecture) would overwrite each other.

    Raises
    ------
    ArtifactNameConflictError
        If two artifacts with different bundle paths share a file name
    """
    seen: dict[str, Path] = {}
    for artifact in artifacts:
        first = seen.setdefault(artifact.file_name, artifact.bundle_path)
        if first != artifact.bundle_path:
            raise ArtifactNameConflictError(artifact.file_name, first, artifact.bundle_path)
