"""Install receipt stored alongside each installed version."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
import hashlib

import yaml


RECEIPT_NAME = ".pwshup.yaml"
RECEIPT_VERSION = 1


def calculate_sha256(file_path: Path) -> str:
    """Calculate SHA256 hash of a file."""
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


@dataclass
class Receipt:
    """Record of a completed install."""

    version: str
    tag: str
    asset: str
    os: str
    arch: str
    executable: str
    sha256: str
    installed_at: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary for YAML serialization."""
        return {
            "receipt_version": RECEIPT_VERSION,
            "version": self.version,
            "tag": self.tag,
            "asset": self.asset,
            "os": self.os,
            "arch": self.arch,
            "executable": self.executable,
            "sha256": self.sha256,
            "installed_at": self.installed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Receipt":
        """Create Receipt from dictionary."""
        installed_at = data.get("installed_at")
        if isinstance(installed_at, str):
            installed_at = datetime.fromisoformat(installed_at)
        elif not isinstance(installed_at, datetime):
            installed_at = datetime.now()

        return cls(
            version=str(data["version"]),
            tag=data.get("tag", ""),
            asset=data.get("asset", ""),
            os=data.get("os", ""),
            arch=data.get("arch", ""),
            executable=data["executable"],
            sha256=data["sha256"],
            installed_at=installed_at,
        )


def write_receipt(install_dir: Path, receipt: Receipt) -> Path:
    """Write a receipt into an install directory."""
    path = install_dir / RECEIPT_NAME
    with open(path, "w") as f:
        yaml.safe_dump(receipt.to_dict(), f, default_flow_style=False, sort_keys=False)
    return path


def read_receipt(install_dir: Path) -> Receipt | None:
    """Read the receipt of an install directory.

    Returns None if the receipt is missing or malformed.
    """
    path = install_dir / RECEIPT_NAME
    if not path.is_file():
        return None

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            return None
        return Receipt.from_dict(data)
    except (yaml.YAMLError, KeyError, ValueError, OSError):
        return None
