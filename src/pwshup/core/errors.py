"""Exceptions raised by the setup pipeline.

Every stage raises a subclass of SetupError and aborts the run. Lower-level
errors (httpx, tarfile, zipfile, OSError) are chained with ``raise ... from``
so their original text reaches the user.
"""


class SetupError(Exception):
    """Base exception for setup operations."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UnsupportedPlatformError(SetupError):
    """Host operating system could not be determined."""


class CatalogFetchError(SetupError):
    """Release list could not be fetched from GitHub."""


class NoReleaseFoundError(SetupError):
    """No release in the catalog satisfies a release track."""


class ReleaseNotFoundError(SetupError):
    """An explicitly requested version is not in the catalog."""

    def __init__(self, version: str):
        super().__init__(f"Release {version} not found", {"version": version})
        self.version = version


class UnsupportedOSError(SetupError):
    """No asset patterns exist for the operating system."""


class UnsupportedArchitectureError(SetupError):
    """Architecture is not published for the operating system."""

    def __init__(self, os_family: str, arch: str, valid: list[str]):
        super().__init__(
            f"Architecture '{arch}' is not supported on {os_family}. "
            f"Supported: {', '.join(valid)}",
            {"os": os_family, "arch": arch, "valid": valid},
        )
        self.valid = valid


class AssetNotFoundError(SetupError):
    """No release asset matches the platform pattern."""

    def __init__(self, tag: str, pattern: str, available: list[str]):
        listing = "\n".join(f"  - {name}" for name in available) or "  (none)"
        super().__init__(
            f"No asset matching '{pattern}' in release {tag}.\nAvailable assets:\n{listing}",
            {"tag": tag, "pattern": pattern, "available": available},
        )
        self.available = available


class DownloadError(SetupError):
    """Download failed after all retry attempts."""


class ExtractionError(SetupError):
    """Archive could not be extracted."""


class InstallVerificationError(SetupError):
    """Executable missing after extraction."""


class InvalidVersionError(SetupError):
    """Version string cannot name a directory under the install root."""


class NotInstalledError(SetupError):
    """Version is not installed."""
