"""Archive extraction into an install location."""

from pathlib import Path
import logging
import shutil
import stat
import tarfile
import zipfile

from pwshup.core.cache import executable_name
from pwshup.core.errors import ExtractionError
from pwshup.models.install import InstallLocation

logger = logging.getLogger(__name__)


def make_executable(path: Path) -> None:
    """Make a file executable."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


def extract_archive(archive_path: Path, dest_dir: Path) -> Path:
    """Extract a zip or gzipped tar archive into ``dest_dir``."""
    name = archive_path.name.lower()

    try:
        if name.endswith(".tar.gz") or name.endswith(".tgz"):
            with tarfile.open(archive_path, "r:gz") as tar:
                tar.extractall(dest_dir, filter="data")

        elif name.endswith(".zip"):
            with zipfile.ZipFile(archive_path, "r") as zf:
                zf.extractall(dest_dir)

        else:
            raise ExtractionError(f"Unsupported archive format: {archive_path.name}")

    except (tarfile.TarError, zipfile.BadZipFile, OSError) as e:
        raise ExtractionError(f"Failed to extract {archive_path}: {e}") from e

    return dest_dir


def install_archive(archive_path: Path, location: InstallLocation, os_family: str) -> Path:
    """Install an archive as a clean replacement of ``location``.

    Any existing directory is removed first, so files from an earlier or
    interrupted install never survive.

    Returns the install path.
    """
    install_dir = location.path
    try:
        if install_dir.exists():
            logger.info("Removing existing install at %s", install_dir)
            shutil.rmtree(install_dir)
        install_dir.mkdir(parents=True)
    except OSError as e:
        raise ExtractionError(f"Failed to prepare {install_dir}: {e}") from e

    extract_archive(archive_path, install_dir)

    if os_family != "windows":
        # Execute bits do not survive the trip reliably
        exe = install_dir / executable_name(os_family)
        if exe.is_file():
            try:
                make_executable(exe)
            except OSError as e:
                raise ExtractionError(f"Failed to mark {exe} executable: {e}") from e

    return install_dir
