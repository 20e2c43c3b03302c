"""Hand results to the calling workflow."""

import logging
import os
from pathlib import Path

from pwshup.core.config import SetupConfig
from pwshup.models.install import ResolvedResult

logger = logging.getLogger(__name__)


def _append(path: Path, line: str) -> None:
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{line}\n")


def report_result(result: ResolvedResult, config: SetupConfig, environ=None) -> None:
    """Publish the resolved version and install path.

    Writes ``version`` and ``path`` outputs to the GitHub Actions output
    file, adds the install path to the workflow's PATH file, and prepends
    it to PATH for the current process.
    """
    if environ is None:
        environ = os.environ

    install_path = str(result.path)

    if config.github_output is not None:
        _append(config.github_output, f"version={result.version}")
        _append(config.github_output, f"path={install_path}")
    if config.github_path is not None:
        _append(config.github_path, install_path)

    current = environ.get("PATH", "")
    environ["PATH"] = f"{install_path}{os.pathsep}{current}" if current else install_path
    logger.debug("Prepended %s to PATH", install_path)
