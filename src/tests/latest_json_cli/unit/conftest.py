"""Fixtures for CLI unit tests."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Provide Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def not_on_macos():
    """Keep the macOS host-architecture fallback out of CLI tests."""
    with patch("latest_json.bundles.catalog._running_on_macos", return_value=False):
        yield


@pytest.fixture
def built_project(tauri_project):
    """Fake Tauri project with a signed Linux and Windows build."""
    tauri_project.add_bundle("deb", "app_1.2.0_amd64.deb", signature="DEB-SIG")
    tauri_project.add_bundle("nsis", "App_1.2.0_x64-setup.exe", signature="NSIS-SIG")
    tauri_project.add_bundle("msi", "App_1.2.0_x64_en-US.msi", signature="MSI-SIG")
    return tauri_project
