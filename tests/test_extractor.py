"""Tests for archive installation."""

import os
import sys

import pytest

from pwshup.core.errors import ExtractionError
from pwshup.core.extractor import extract_archive, install_archive
from pwshup.models.install import InstallLocation

from helpers import build_tar_gz, build_zip


def test_tar_gz_install(tmp_path):
    archive = build_tar_gz(
        tmp_path / "powershell-7.4.6-linux-x64.tar.gz",
        {"pwsh": b"#!/bin/sh\n", "Modules/PSReadLine/PSReadLine.psd1": b"@{}"},
    )
    location = InstallLocation(tmp_path / "cache", "7.4.6")

    result = install_archive(archive, location, "linux")

    assert result == location.path
    assert (result / "pwsh").read_bytes() == b"#!/bin/sh\n"
    assert (result / "Modules" / "PSReadLine" / "PSReadLine.psd1").exists()


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_executable_bit_set_on_unix(tmp_path):
    archive = build_tar_gz(tmp_path / "a.tar.gz", {"pwsh": b"#!/bin/sh\n"})
    location = InstallLocation(tmp_path / "cache", "7.4.6")

    install_archive(archive, location, "macos")

    assert os.access(location.path / "pwsh", os.X_OK)


def test_zip_install(tmp_path):
    archive = build_zip(
        tmp_path / "PowerShell-7.4.6-win-x64.zip",
        {"pwsh.exe": b"MZ", "ref/System.Runtime.dll": b"MZ"},
    )
    location = InstallLocation(tmp_path / "cache", "7.4.6")

    install_archive(archive, location, "windows")

    assert (location.path / "pwsh.exe").read_bytes() == b"MZ"
    assert (location.path / "ref" / "System.Runtime.dll").exists()


def test_reinstall_removes_stale_files(tmp_path):
    location = InstallLocation(tmp_path / "cache", "7.4.6")
    location.path.mkdir(parents=True)
    (location.path / "stale.txt").write_text("old")
    (location.path / "old-dir").mkdir()
    (location.path / "old-dir" / "leftover.dll").write_text("old")

    archive = build_tar_gz(tmp_path / "a.tar.gz", {"pwsh": b"new"})
    install_archive(archive, location, "linux")

    assert sorted(p.name for p in location.path.iterdir()) == ["pwsh"]


def test_unsupported_format(tmp_path):
    archive = tmp_path / "powershell-7.4.6.pkg"
    archive.write_bytes(b"xar!")
    with pytest.raises(ExtractionError, match="Unsupported archive format"):
        extract_archive(archive, tmp_path / "out")


@pytest.mark.parametrize("name", ["broken.tar.gz", "broken.zip"])
def test_corrupt_archive(tmp_path, name):
    archive = tmp_path / name
    archive.write_bytes(b"this is not an archive")
    location = InstallLocation(tmp_path / "cache", "7.4.6")

    with pytest.raises(ExtractionError, match="Failed to extract"):
        install_archive(archive, location, "linux")


def test_file_at_install_path(tmp_path):
    archive = build_tar_gz(tmp_path / "a.tar.gz", {"pwsh": b"new"})
    location = InstallLocation(tmp_path / "cache", "7.4.6")
    location.base_path.mkdir()
    location.path.write_text("not a directory")

    with pytest.raises(ExtractionError, match="Failed to prepare"):
        install_archive(archive, location, "linux")
