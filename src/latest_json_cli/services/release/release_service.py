"""Service that publishes a Tauri build as an updater release directory."""

from dataclasses import dataclass, field
from pathlib import Path

from latest_json.common.errors import NoArtifactsError
from latest_json.discovery import check_file_names, find_artifacts
from latest_json.manifest import generate_manifest, write_manifest
from latest_json.models import Artifact, SkippedCandidate
from latest_json.project import resolve_version
from latest_json_cli.core.constants import Icons
from latest_json_cli.core.output import OutputStrategy
from latest_json_cli.services.base import BaseService
from latest_json_common.config import ProjectLayout
from latest_json_common.io import copy_file


@dataclass
class ReleaseOptions:
    """Inputs of a single release run."""

    tauri_project: Path
    output_dir: Path
    base_url: str
    notes: str | None = None
    allow_overwrite: bool = False
    layout: ProjectLayout = field(default_factory=ProjectLayout)


@dataclass
class ReleaseSummary:
    """Outcome of a successful release run."""

    version: str
    manifest_path: Path
    artifacts: list[Artifact] = field(default_factory=list)
    copied: list[Path] = field(default_factory=list)
    skipped: list[SkippedCandidate] = field(default_factory=list)

    @property
    def artifact_count(self) -> int:
        """Number of artifacts that made it into the release."""
        return len(self.artifacts)


class ReleaseService(BaseService):
    """Runs the release pipeline against one Tauri project.

    Steps, in order: resolve the version, scan for artifacts, copy them into
    the output directory, then generate and write ``latest.json``. Nothing is
    copied or written when the scan comes back empty or two bundles share a
    file name.
    """

    def __init__(
        self,
        options: ReleaseOptions,
        output: OutputStrategy,
    ) -> None:
        self.options = options
        self.output = output
        super().__init__(options.tauri_project)

    def run(self) -> ReleaseSummary:
        """Execute the pipeline.

        Returns
        -------
        ReleaseSummary
            What was published

        Raises
        ------
        ConfigurationError
            If the version cannot be resolved
        NoArtifactsError
            If no signed bundle was found
        ArtifactNameConflictError
            If two bundles would be copied to the same output file
        PlatformCollisionError
            If an artifact would replace an existing platform entry
        FileOperationError
            If copying or writing fails
        """
        opts = self.options
        out = self.output

        out.plain("Reading Tauri configuration...")
        version = resolve_version(self.project_root, opts.layout)
        out.plain(f"Version: {version}")
        self.log_info("Resolved version %s", version)

        out.plain("Searching for build artifacts...")
        scan = find_artifacts(self.project_root, opts.layout)
        out.plain("Search directories:")
        for directory in scan.search_directories:
            out.plain(f"  - {directory}")
        for candidate in scan.skipped:
            out.warning(f"{Icons.WARNING} {candidate.message}")

        if not scan.artifacts:
            raise NoArtifactsError(scan.search_directories)

        out.plain(f"Found {len(scan.artifacts)} artifact(s):")
        for artifact in scan.artifacts:
            out.plain(f"  - {artifact.label}: {artifact.file_name}")
            out.detail(f"bundle: {artifact.bundle_path}")
            out.detail(f"signature: {artifact.signature_path}")
        check_file_names(scan.artifacts)

        out.plain("")
        out.plain("Copying artifacts to output directory...")
        copied = []
        for artifact in scan.artifacts:
            copied.append(copy_file(artifact.bundle_path, opts.output_dir))
            out.plain(f"  Copied: {artifact.file_name}")

        out.plain("")
        out.plain("Generating latest.json...")
        manifest = generate_manifest(
            scan.artifacts,
            version=version,
            base_url=opts.base_url,
            output_dir=opts.output_dir,
            notes=opts.notes,
            allow_overwrite=opts.allow_overwrite,
        )
        for key, entry in manifest.platforms.items():
            out.detail(f"{key} {Icons.ARROW_RIGHT} {entry.url}")
        path = write_manifest(manifest, opts.output_dir)
        out.success("Generated latest.json")
        out.info(f"Manifest: {path}")

        summary = ReleaseSummary(
            version=version,
            manifest_path=path,
            artifacts=list(scan.artifacts),
            copied=copied,
            skipped=list(scan.skipped),
        )
        self.log_info(
            "Published %d artifact(s) to %s",
            summary.artifact_count,
            opts.output_dir,
        )

        out.plain("")
        out.success("Done!")
        return summary
