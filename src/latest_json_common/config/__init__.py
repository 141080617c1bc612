"""Tool configuration for tauri-latest-json (latest_json_common.config).

This package provides:
- project: layered YAML configuration (defaults, user, project) and the
  ``ProjectLayout`` describing where a Tauri project keeps its files
"""

from .project import ProjectLayout, load_merged_config

__all__ = [
    "ProjectLayout",
    "load_merged_config",
]
