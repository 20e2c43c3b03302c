"""Platform detection and asset matching."""

import fnmatch
import logging
import platform

from pwshup.core.errors import (
    AssetNotFoundError,
    UnsupportedArchitectureError,
    UnsupportedOSError,
    UnsupportedPlatformError,
)
from pwshup.models.install import PlatformTarget
from pwshup.models.release import Asset, Release

logger = logging.getLogger(__name__)

AUTO = "auto"

# Raw platform.machine() values, lowercased
MACHINE_ARCH = {
    "x86_64": "x64",
    "amd64": "x64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm32",
    "armv7": "arm32",
    "armv6l": "arm32",
    "arm": "arm32",
}

# Published artifact names per (OS, architecture). The single "*" stands
# for the version token.
ASSET_PATTERNS = {
    "windows": {
        "x64": "PowerShell-*-win-x64.zip",
        "x86": "PowerShell-*-win-x86.zip",
        "arm64": "PowerShell-*-win-arm64.zip",
    },
    "macos": {
        "x64": "powershell-*-osx-x64.tar.gz",
        "arm64": "powershell-*-osx-arm64.tar.gz",
    },
    "linux": {
        "x64": "powershell-*-linux-x64.tar.gz",
        "arm64": "powershell-*-linux-arm64.tar.gz",
        "arm32": "powershell-*-linux-arm32.tar.gz",
    },
}


def _normalize_os(system: str) -> str:
    s = system.lower()
    if s.startswith("win"):
        return "windows"
    if s == "darwin":
        return "macos"
    if s == "linux":
        return "linux"
    raise UnsupportedPlatformError(f"Unsupported operating system: {system or 'unknown'}")


def _normalize_arch(machine: str) -> str:
    arch = MACHINE_ARCH.get(machine.lower())
    if arch is None:
        # Unknown CPUs get the x64 build rather than an error
        logger.debug("Unrecognized machine '%s', assuming x64", machine)
        return "x64"
    return arch


def detect_platform(
    requested_arch: str = AUTO,
    system: str | None = None,
    machine: str | None = None,
) -> PlatformTarget:
    """Detect the target platform.

    An explicit ``requested_arch`` is used as given; it is checked against
    the published matrix later, by ``pattern_for``.
    """
    if system is None:
        system = platform.system()
    os_family = _normalize_os(system)

    if requested_arch == AUTO:
        if machine is None:
            machine = platform.machine()
        arch = _normalize_arch(machine)
    else:
        arch = requested_arch

    return PlatformTarget(os_family=os_family, arch=arch)


def pattern_for(os_family: str, arch: str) -> str:
    """Get the asset name pattern for an OS/architecture pair."""
    patterns = ASSET_PATTERNS.get(os_family)
    if patterns is None:
        raise UnsupportedOSError(f"Unsupported operating system: {os_family}")

    pattern = patterns.get(arch)
    if pattern is None:
        raise UnsupportedArchitectureError(os_family, arch, list(patterns))
    return pattern


def select_asset(release: Release, pattern: str) -> Asset:
    """Find the first asset whose name matches the pattern."""
    lowered = pattern.lower()
    for asset in release.assets:
        if fnmatch.fnmatch(asset.name.lower(), lowered):
            return asset

    raise AssetNotFoundError(
        release.tag_name, pattern, [asset.name for asset in release.assets]
    )
