"""Root pytest configuration and shared fixtures for the tauri-latest-json suite."""

import json
import logging
import os
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

PACKAGE_LOGGERS = ("latest_json", "latest_json_cli", "latest_json_common")


class TauriProject:
    """Builds a fake Tauri project tree under a temporary directory.

    Parameters
    ----------
    root : Path
        Project root (the directory holding ``src-tauri``)
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.src_tauri = root / "src-tauri"
        self.target = self.src_tauri / "target"

    def write_config(self, **fields) -> Path:
        """Write ``src-tauri/tauri.conf.json`` with the given top-level fields."""
        path = self.src_tauri / "tauri.conf.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(fields), encoding="utf-8")
        return path

    def bundle_dir(self, triple: str | None = None) -> Path:
        """``target/[<triple>/]release/bundle``."""
        base = self.target / triple if triple else self.target
        return base / "release" / "bundle"

    def add_bundle(
        self,
        subdir: str,
        name: str,
        signature: str | None = "dW50cnVzdGVkIGNvbW1lbnQ=",
        triple: str | None = None,
    ) -> Path:
        """Create a bundle file and, unless ``signature`` is None, its ``.sig``."""
        directory = self.bundle_dir(triple) / subdir
        directory.mkdir(parents=True, exist_ok=True)
        bundle = directory / name
        bundle.write_bytes(b"bundle:" + name.encode())
        if signature is not None:
            bundle.with_name(name + ".sig").write_text(signature + "\n", encoding="utf-8")
        return bundle


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user config, log files and LATEST_JSON_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in [key for key in os.environ if key.startswith("LATEST_JSON_")]:
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_package_loggers():
    """Undo handler and propagation changes made by the CLI's logger setup."""
    yield
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
        logger.filters.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


@pytest.fixture
def tauri_project(tmp_path) -> TauriProject:
    """Provide an empty fake Tauri project with a ``1.2.0`` config."""
    project = TauriProject(tmp_path / "app")
    project.write_config(version="1.2.0", identifier="com.example.app")
    return project


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Provide a not-yet-created release directory."""
    return tmp_path / "release"
