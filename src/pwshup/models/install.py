"""Install target and result data models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PlatformTarget:
    """OS family and CPU architecture an install is made for."""

    os_family: str  # windows, macos, linux
    arch: str  # x64, x86, arm64, arm32

    def __str__(self) -> str:
        return f"{self.os_family}/{self.arch}"


@dataclass(frozen=True)
class InstallLocation:
    """Deterministic install directory for one version."""

    base_path: Path
    version: str

    @property
    def path(self) -> Path:
        return self.base_path / self.version


@dataclass(frozen=True)
class ResolvedResult:
    """Outcome of a setup run."""

    version: str  # no leading "v"
    path: Path
    tag: str = ""
    cached: bool = False
