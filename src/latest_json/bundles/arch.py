"""Architecture name normalization."""

from __future__ import annotations

import platform

from latest_json.models.types import Arch

# Vendor spellings -> canonical architecture. Lookups are case-sensitive.
ARCH_SYNONYMS: dict[str, Arch] = {
    "amd64": Arch.X86_64,
    "x86_64": Arch.X86_64,
    "x64": Arch.X86_64,
    "arm64": Arch.AARCH64,
    "aarch64": Arch.AARCH64,
    "i386": Arch.I686,
    "i686": Arch.I686,
    "x86": Arch.I686,
    "x32": Arch.I686,
    "arm": Arch.ARMV7,
    "armhf": Arch.ARMV7,
    "armhfp": Arch.ARMV7,
    "armv7": Arch.ARMV7,
    "universal": Arch.UNIVERSAL,
}


def normalize_arch(raw: str) -> Arch | None:
    """Map a vendor architecture spelling to the canonical set.

    Parameters
    ----------
    raw : str
        Architecture token as found in a file name or path

    Returns
    -------
    Arch | None
        Canonical architecture, or None when ``raw`` is not a known synonym
    """
    return ARCH_SYNONYMS.get(raw)


def host_arch() -> Arch | None:
    """Architecture of the machine running this process, if recognized."""
    return normalize_arch(platform.machine().lower())
