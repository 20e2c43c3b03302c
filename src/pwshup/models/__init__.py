"""Data models for pwshup."""

from pwshup.models.install import InstallLocation, PlatformTarget, ResolvedResult
from pwshup.models.release import Release, Asset
from pwshup.models.request import Track, VersionRequest

__all__ = [
    "Asset",
    "InstallLocation",
    "PlatformTarget",
    "Release",
    "ResolvedResult",
    "Track",
    "VersionRequest",
]
