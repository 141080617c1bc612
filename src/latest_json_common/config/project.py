"""Project/user YAML configuration loading for tauri-latest-json.

This module locates, loads, and deep-merges configuration from the user
(~/.config/latest-json/config.yaml) and project (<tauri-project>/.latest-json.yaml)
files on top of built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from latest_json_common.constants import PROJECT_CONFIG_FILE
from latest_json_common.io import safe_read_yaml
from latest_json_common.io.files import FileOperationError
from latest_json_common.path import get_user_config_path


@dataclass(frozen=True)
class ProjectLayout:
    """Locations inside a Tauri project, relative to the project root.

    Attributes
    ----------
    config_dir : str
        Directory holding the Tauri config file
    config_file : str
        Name of the Tauri config file
    build_dir : str
        Directory holding the cargo ``target`` directory
    """

    config_dir: str = "src-tauri"
    config_file: str = "tauri.conf.json"
    build_dir: str = "src-tauri"

    def config_path(self, project_root: Path) -> Path:
        """Path of the Tauri config file for ``project_root``."""
        return project_root / self.config_dir / self.config_file

    def target_dir(self, project_root: Path) -> Path:
        """Path of the cargo ``target`` directory for ``project_root``."""
        return project_root / self.build_dir / "target"

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> ProjectLayout:
        """Build a layout from the ``layout`` section of a merged config.

        Non-string or empty values fall back to the defaults.
        """
        section = cfg.get("layout")
        if not isinstance(section, dict):
            return cls()

        defaults = cls()
        values: dict[str, str] = {}
        for name in ("config_dir", "config_file", "build_dir"):
            value = section.get(name)
            values[name] = (
                value if isinstance(value, str) and value else getattr(defaults, name)
            )
        return cls(**values)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries in place and return ``base``.

    Values from ``override`` take precedence. Nested dicts are merged
    recursively; other values are replaced.
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def default_config() -> dict[str, Any]:
    """Return the default configuration structure."""
    layout = ProjectLayout()
    return {
        "defaults": {
            "log_level": "WARNING",
        },
        "layout": {
            "config_dir": layout.config_dir,
            "config_file": layout.config_file,
            "build_dir": layout.build_dir,
        },
    }


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, treating missing or malformed files as empty.

    Returns an empty dict when the file is missing, unreadable, or not a
    mapping at the top level.
    """
    try:
        if not path.exists():
            return {}
        data = safe_read_yaml(path) or {}
        return data if isinstance(data, dict) else {}
    except FileOperationError:
        return {}


def get_project_config_path(project_root: Path) -> Path:
    """Get path to the project-level configuration file."""
    return project_root / PROJECT_CONFIG_FILE


def load_merged_config(project_root: Path) -> dict[str, Any]:
    """Load default + user + project YAML config into a single dict."""
    cfg = default_config()

    user_cfg = load_yaml(get_user_config_path())
    if user_cfg:
        deep_merge(cfg, user_cfg)

    project_cfg = load_yaml(get_project_config_path(project_root))
    if project_cfg:
        deep_merge(cfg, project_cfg)

    return cfg
