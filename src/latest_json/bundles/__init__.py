"""Bundle format catalog and architecture normalization."""

from latest_json.bundles.arch import ARCH_SYNONYMS, host_arch, normalize_arch
from latest_json.bundles.catalog import (
    BUNDLE_CATALOG,
    BundleDescriptor,
    extract_macos_arch,
)

__all__ = [
    "ARCH_SYNONYMS",
    "BUNDLE_CATALOG",
    "BundleDescriptor",
    "extract_macos_arch",
    "host_arch",
    "normalize_arch",
]
