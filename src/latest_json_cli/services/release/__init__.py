"""Release publishing service."""

from latest_json_cli.services.release.release_service import (
    ReleaseOptions,
    ReleaseService,
    ReleaseSummary,
)

__all__ = ["ReleaseOptions", "ReleaseService", "ReleaseSummary"]
