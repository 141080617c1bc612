"""Tests for latest_json.manifest.keys."""

import pytest

from latest_json.manifest.keys import (
    UNIVERSAL_DARWIN_KEYS,
    basic_key,
    extended_key,
    get_platform_keys,
    is_windows_basic_key,
    prefers_over_existing,
)
from latest_json.models import Arch, BundleType


class TestPlatformKeys:
    """Tests for key derivation."""

    def test_linux_deb(self, make_artifact):
        """Regular artifacts get their basic and bundle-qualified keys."""
        artifact = make_artifact(BundleType.DEB, Arch.X86_64, "app_amd64.deb")
        assert get_platform_keys(artifact) == ["linux-x86_64", "linux-x86_64-deb"]

    def test_windows_msi(self, make_artifact):
        """Windows installers follow the same scheme."""
        artifact = make_artifact(BundleType.MSI, Arch.AARCH64, "App_arm64_en-US.msi")
        assert basic_key(artifact) == "windows-aarch64"
        assert extended_key(artifact) == "windows-aarch64-msi"

    def test_darwin_single_arch(self, make_artifact):
        """A single-arch macOS bundle uses the ``-app`` suffix."""
        artifact = make_artifact(BundleType.APP, Arch.AARCH64, "App_aarch64.app.tar.gz")
        assert get_platform_keys(artifact) == ["darwin-aarch64", "darwin-aarch64-app"]

    def test_darwin_universal_fans_out(self, make_artifact):
        """A universal macOS bundle serves both architectures."""
        artifact = make_artifact(BundleType.APP, Arch.UNIVERSAL, "App_universal.app.tar.gz")
        keys = get_platform_keys(artifact)
        assert keys == list(UNIVERSAL_DARWIN_KEYS)
        assert "darwin-universal" not in keys

    def test_returns_fresh_list(self, make_artifact):
        """Callers may mutate the returned list safely."""
        artifact = make_artifact(BundleType.APP, Arch.UNIVERSAL, "App_universal.app.tar.gz")
        get_platform_keys(artifact).clear()
        assert len(get_platform_keys(artifact)) == 4


class TestWindowsPreference:
    """Tests for the Windows basic-key helpers."""

    @pytest.mark.parametrize(
        ("bundle_type", "file_name", "preferred"),
        [
            (BundleType.MSI, "App_x64_en-US.msi", True),
            (BundleType.NSIS, "App_x64-setup.exe", False),
        ],
    )
    def test_msi_preferred(self, make_artifact, bundle_type, file_name, preferred):
        """MSI wins the shared key, NSIS does not."""
        artifact = make_artifact(bundle_type, Arch.X86_64, file_name)
        assert prefers_over_existing(artifact) is preferred

    def test_basic_key_detection(self, make_artifact):
        """Only the Windows basic key is the shared one."""
        artifact = make_artifact(BundleType.NSIS, Arch.X86_64, "App_x64-setup.exe")
        assert is_windows_basic_key(artifact, "windows-x86_64")
        assert not is_windows_basic_key(artifact, "windows-x86_64-nsis")

    def test_non_windows(self, make_artifact):
        """Linux keys are never treated as the shared Windows key."""
        artifact = make_artifact(BundleType.DEB, Arch.X86_64, "app_amd64.deb")
        assert not is_windows_basic_key(artifact, "linux-x86_64")
