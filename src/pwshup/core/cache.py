"""Per-version install locations and the installed-version check."""

import logging
import os
import shutil
from pathlib import Path

from pwshup.core.config import SetupConfig
from pwshup.core.errors import InvalidVersionError, NotInstalledError, SetupError
from pwshup.core.manifest import calculate_sha256, read_receipt
from pwshup.models.install import InstallLocation

logger = logging.getLogger(__name__)

TOOL_NAME = "pwsh"


def executable_name(os_family: str) -> str:
    """Name of the PowerShell executable on an OS."""
    return "pwsh.exe" if os_family == "windows" else "pwsh"


def base_path(config: SetupConfig, os_family: str) -> Path:
    """Directory holding one subdirectory per installed version.

    Precedence: explicit install root, shared runner tool cache, then a
    per-OS user directory.
    """
    if config.install_root is not None:
        return config.install_root
    if config.tool_cache_dir is not None:
        return config.tool_cache_dir / TOOL_NAME

    if os_family == "windows":
        local = config.local_app_data or config.home / "AppData" / "Local"
        return local / TOOL_NAME
    if os_family == "macos":
        return config.home / "Library" / "Application Support" / TOOL_NAME
    data_home = config.xdg_data_home or config.home / ".local" / "share"
    return data_home / TOOL_NAME


def check_version(version: str) -> str:
    """Reject version strings that are not a single directory name."""
    if (
        not version
        or version in (".", "..")
        or "/" in version
        or "\\" in version
        or os.sep in version
    ):
        raise InvalidVersionError(f"Invalid version: '{version}'", {"version": version})
    return version


def locate(config: SetupConfig, os_family: str, version: str) -> InstallLocation:
    """Compute the install location for a version."""
    return InstallLocation(
        base_path=base_path(config, os_family), version=check_version(version)
    )


def is_installed(location: InstallLocation, os_family: str, strict: bool = False) -> bool:
    """Check whether a version is already installed.

    By default only the executable's presence is checked, so an interrupted
    earlier install whose executable was already written counts as
    installed. ``strict`` additionally requires a receipt for the same
    version whose recorded hash matches the executable on disk.
    """
    exe = location.path / executable_name(os_family)
    if not exe.is_file():
        return False
    if not strict:
        return True

    receipt = read_receipt(location.path)
    if receipt is None:
        logger.info("No install receipt in %s", location.path)
        return False
    if receipt.version != location.version:
        logger.info(
            "Receipt in %s names version %s", location.path, receipt.version
        )
        return False
    if calculate_sha256(exe) != receipt.sha256:
        logger.info("Executable hash in %s does not match receipt", location.path)
        return False
    return True


def installed_versions(config: SetupConfig, os_family: str) -> list[InstallLocation]:
    """List installed versions under the base path."""
    root = base_path(config, os_family)
    if not root.is_dir():
        return []

    locations = []
    for item in sorted(root.iterdir()):
        if not item.is_dir():
            continue
        location = InstallLocation(base_path=root, version=item.name)
        if is_installed(location, os_family):
            locations.append(location)
    return locations


def remove(location: InstallLocation, os_family: str) -> None:
    """Remove an installed version.

    Only a direct child of the base path that holds the executable is
    deleted.

    Raises:
        InvalidVersionError: the version is not a single directory name
        NotInstalledError: no installed version at the location
    """
    check_version(location.version)
    if location.path.parent != location.base_path or not is_installed(location, os_family):
        raise NotInstalledError(
            f"PowerShell {location.version} is not installed",
            {"path": str(location.path)},
        )

    try:
        shutil.rmtree(location.path)
    except OSError as e:
        raise SetupError(f"Failed to remove {location.path}: {e}") from e
