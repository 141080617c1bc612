"""Services backing the tauri-latest-json command."""

from latest_json_cli.services.base import BaseService
from latest_json_cli.services.release import ReleaseOptions, ReleaseService, ReleaseSummary

__all__ = ["BaseService", "ReleaseOptions", "ReleaseService", "ReleaseSummary"]
