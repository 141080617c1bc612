"""Tests for latest_json.models."""

from pathlib import Path

import pytest

from latest_json.common.errors import ManifestFormatError
from latest_json.models import (
    Arch,
    Artifact,
    BundleType,
    Manifest,
    OperatingSystem,
    PlatformEntry,
    SkippedCandidate,
    SkipReason,
)


class TestArtifact:
    """Tests for the Artifact record."""

    def test_label(self):
        """Labels read like ``linux-x86_64 (deb)``."""
        artifact = Artifact(
            os=OperatingSystem.LINUX,
            arch=Arch.X86_64,
            bundle_type=BundleType.DEB,
            bundle_path=Path("/b/app.deb"),
            signature_path=Path("/b/app.deb.sig"),
            file_name="app.deb",
        )
        assert artifact.label == "linux-x86_64 (deb)"

    def test_enum_values_are_wire_strings(self):
        """Enum values are the strings used in platform keys."""
        assert OperatingSystem.DARWIN.value == "darwin"
        assert Arch.ARMV7.value == "armv7"
        assert BundleType.APPIMAGE.value == "appimage"


class TestSkippedCandidate:
    """Tests for skip messages."""

    def test_missing_signature_message(self):
        """The message names the file and the reason."""
        skipped = SkippedCandidate(Path("/b/app.deb"), SkipReason.MISSING_SIGNATURE)
        assert skipped.message == "Signature file not found for app.deb, skipping"

    def test_unknown_arch_message(self):
        """Unknown architectures get their own message."""
        skipped = SkippedCandidate(Path("/b/App.app.tar.gz"), SkipReason.UNKNOWN_ARCH)
        assert skipped.message == (
            "Could not detect architecture for App.app.tar.gz, skipping"
        )


class TestManifestFromDict:
    """Tests for manifest validation."""

    def test_valid(self):
        """A well-formed document is accepted."""
        manifest = Manifest.from_dict(
            {
                "version": "1.0.0",
                "pub_date": "2024-01-01T00:00:00.000Z",
                "notes": "n",
                "platforms": {
                    "linux-x86_64": {"url": "https://x.io/a", "signature": "s"},
                },
            },
        )
        assert manifest.platforms["linux-x86_64"] == PlatformEntry("https://x.io/a", "s")
        assert manifest.notes == "n"

    def test_optional_fields(self):
        """Only version and platforms are required."""
        manifest = Manifest.from_dict({"version": "1.0.0", "platforms": {}})
        assert manifest.pub_date is None
        assert manifest.notes is None

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"platforms": {}},
            {"version": 1, "platforms": {}},
            {"version": "1.0.0"},
            {"version": "1.0.0", "platforms": {}, "notes": 3},
            {"version": "1.0.0", "platforms": {"k": "url"}},
            {"version": "1.0.0", "platforms": {"k": {"url": "/rel", "signature": "s"}}},
            {"version": "1.0.0", "platforms": {"k": {"url": "https://x.io/a"}}},
        ],
    )
    def test_invalid(self, data):
        """Shape violations raise ManifestFormatError."""
        with pytest.raises(ManifestFormatError):
            Manifest.from_dict(data)


class TestManifestToDict:
    """Tests for serialization."""

    def test_platform_entries(self):
        """Entries serialize as url/signature objects."""
        manifest = Manifest(
            version="1.0.0",
            platforms={"windows-x86_64": PlatformEntry("https://x.io/a.msi", "s")},
        )
        assert manifest.to_dict() == {
            "version": "1.0.0",
            "platforms": {
                "windows-x86_64": {"url": "https://x.io/a.msi", "signature": "s"},
            },
        }
