"""Generate Tauri updater manifests (latest.json) from bundle output.

Typical use::

    from latest_json import find_artifacts, generate_manifest, resolve_version

    version = resolve_version(project)
    scan = find_artifacts(project)
    manifest = generate_manifest(scan.artifacts, version, base_url, output_dir)
    write_manifest(manifest, output_dir)
"""

from latest_json.common.errors import (
    ArtifactNameConflictError,
    ConfigurationError,
    LatestJsonError,
    ManifestFormatError,
    NoArtifactsError,
    PlatformCollisionError,
)
from latest_json.discovery import (
    check_file_names,
    find_artifacts,
    get_search_directories,
)
from latest_json.manifest import (
    generate_manifest,
    get_platform_keys,
    load_existing_manifest,
    write_manifest,
)
from latest_json.models import Arch, Artifact, BundleType, Manifest, OperatingSystem
from latest_json.project import resolve_version

__all__ = [
    "Arch",
    "Artifact",
    "ArtifactNameConflictError",
    "BundleType",
    "ConfigurationError",
    "LatestJsonError",
    "Manifest",
    "ManifestFormatError",
    "NoArtifactsError",
    "OperatingSystem",
    "PlatformCollisionError",
    "check_file_names",
    "find_artifacts",
    "generate_manifest",
    "get_platform_keys",
    "get_search_directories",
    "load_existing_manifest",
    "resolve_version",
    "write_manifest",
]
