"""Enumerations describing platforms and bundle formats."""

from enum import Enum


class OperatingSystem(str, Enum):
    """Target operating systems, as spelled in platform keys."""

    LINUX = "linux"
    DARWIN = "darwin"
    WINDOWS = "windows"


class Arch(str, Enum):
    """Canonical CPU architectures."""

    X86_64 = "x86_64"
    AARCH64 = "aarch64"
    I686 = "i686"
    ARMV7 = "armv7"
    UNIVERSAL = "universal"


class BundleType(str, Enum):
    """Installer/bundle formats produced by the Tauri bundler."""

    APPIMAGE = "appimage"
    DEB = "deb"
    RPM = "rpm"
    APP = "app"
    NSIS = "nsis"
    MSI = "msi"
