"""Configuration and path management for pwshup."""

from dataclasses import dataclass, replace
from pathlib import Path
import os
import tempfile

from pwshup.core.resolver import DEFAULT_LTS_PREFIX


POWERSHELL_REPO = "PowerShell/PowerShell"
DEFAULT_MAX_RETRIES = 10
DEFAULT_INITIAL_DELAY = 10.0


def _env_path(environ, name: str) -> Path | None:
    value = environ.get(name, "").strip()
    return Path(value) if value else None


@dataclass(frozen=True)
class SetupConfig:
    """Configuration for a setup run.

    Environment lookups happen once in ``from_env``; components receive the
    resulting object instead of reading ``os.environ`` themselves.
    """

    home: Path
    temp_dir: Path
    install_root: Path | None = None
    tool_cache_dir: Path | None = None
    local_app_data: Path | None = None
    xdg_data_home: Path | None = None
    token: str | None = None
    repo: str = POWERSHELL_REPO
    lts_prefix: str = DEFAULT_LTS_PREFIX
    architecture: str = "auto"
    max_retries: int = DEFAULT_MAX_RETRIES
    initial_delay: float = DEFAULT_INITIAL_DELAY
    strict: bool = False
    force: bool = False
    github_output: Path | None = None
    github_path: Path | None = None

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "SetupConfig":
        """Create config from environment variables.

        Keyword overrides whose value is None are ignored, so CLI options that
        were not given fall through to the environment.
        """
        if environ is None:
            environ = os.environ

        config = cls(
            home=_env_path(environ, "HOME") or Path.home(),
            temp_dir=_env_path(environ, "RUNNER_TEMP") or Path(tempfile.gettempdir()),
            install_root=_env_path(environ, "PWSHUP_HOME"),
            tool_cache_dir=_env_path(environ, "RUNNER_TOOL_CACHE"),
            local_app_data=_env_path(environ, "LOCALAPPDATA"),
            xdg_data_home=_env_path(environ, "XDG_DATA_HOME"),
            token=environ.get("GITHUB_TOKEN") or None,
            lts_prefix=environ.get("PWSHUP_LTS_PREFIX") or DEFAULT_LTS_PREFIX,
            github_output=_env_path(environ, "GITHUB_OUTPUT"),
            github_path=_env_path(environ, "GITHUB_PATH"),
        )
        given = {key: value for key, value in overrides.items() if value is not None}
        return replace(config, **given) if given else config

    def ensure_dirs(self) -> None:
        """Ensure all required directories exist."""
        self.temp_dir.mkdir(parents=True, exist_ok=True)
