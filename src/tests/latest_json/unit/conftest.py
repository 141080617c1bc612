"""Fixtures for latest_json unit tests."""

from pathlib import Path

import pytest

from latest_json.models import Arch, Artifact, BundleType, OperatingSystem

_OS_BY_BUNDLE = {
    BundleType.APPIMAGE: OperatingSystem.LINUX,
    BundleType.DEB: OperatingSystem.LINUX,
    BundleType.RPM: OperatingSystem.LINUX,
    BundleType.APP: OperatingSystem.DARWIN,
    BundleType.NSIS: OperatingSystem.WINDOWS,
    BundleType.MSI: OperatingSystem.WINDOWS,
}


@pytest.fixture
def make_artifact(tmp_path):
    """Create signed artifacts on disk without going through discovery.

    Returns
    -------
    Callable
        ``make(bundle_type, arch, file_name, signature="sig-<file_name>")``
    """
    bundle_root = tmp_path / "bundles"

    def make(
        bundle_type: BundleType,
        arch: Arch,
        file_name: str,
        signature: str | None = None,
    ) -> Artifact:
        bundle_root.mkdir(parents=True, exist_ok=True)
        bundle_path = bundle_root / file_name
        bundle_path.write_bytes(b"payload")
        signature_path = Path(f"{bundle_path}.sig")
        signature_path.write_text(signature or f"sig-{file_name}", encoding="utf-8")
        return Artifact(
            os=_OS_BY_BUNDLE[bundle_type],
            arch=arch,
            bundle_type=bundle_type,
            bundle_path=bundle_path,
            signature_path=signature_path,
            file_name=file_name,
        )

    return make
