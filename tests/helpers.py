"""Builders for releases and archives used across tests."""

import io
import tarfile
import zipfile
from pathlib import Path

from pwshup.models.release import Asset, Release


def make_release(tag: str, prerelease: bool = False, asset_names: list[str] | None = None) -> Release:
    """Build a Release with download URLs under example.invalid."""
    if asset_names is None:
        version = tag.removeprefix("v")
        asset_names = [
            f"PowerShell-{version}-win-x64.zip",
            f"powershell-{version}-linux-x64.tar.gz",
            f"powershell-{version}-linux-arm64.tar.gz",
            f"powershell-{version}-osx-arm64.tar.gz",
        ]
    assets = tuple(
        Asset(name=name, download_url=f"https://example.invalid/{tag}/{name}", size=1024)
        for name in asset_names
    )
    return Release(tag_name=tag, prerelease=prerelease, draft=False, assets=assets)


def build_tar_gz(path: Path, files: dict[str, bytes]) -> Path:
    """Write a gzipped tar containing ``files`` (name -> content)."""
    with tarfile.open(path, "w:gz") as tar:
        for name, content in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(content)
            info.mode = 0o644
            tar.addfile(info, io.BytesIO(content))
    return path


def build_zip(path: Path, files: dict[str, bytes]) -> Path:
    """Write a zip archive containing ``files`` (name -> content)."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return path
