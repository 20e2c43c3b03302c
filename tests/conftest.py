"""Shared fixtures for pwshup tests."""

from pathlib import Path

import pytest

from pwshup.core.config import SetupConfig
from pwshup.core.logging_setup import reset_logging
from pwshup.models.release import Release

from helpers import make_release


@pytest.fixture
def catalog() -> list[Release]:
    """Newest-first catalog with previews interleaved."""
    return [
        make_release("v7.5.0-preview.2", prerelease=True),
        make_release("v7.5.0-preview.1", prerelease=True),
        make_release("v7.4.6"),
        make_release("v7.2.24"),
        make_release("v7.4.5"),
    ]


@pytest.fixture
def config(tmp_path: Path) -> SetupConfig:
    return SetupConfig(
        home=tmp_path / "home",
        temp_dir=tmp_path / "tmp",
        tool_cache_dir=tmp_path / "toolcache",
        architecture="x64",
        initial_delay=0.0,
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    # CLI runs attach a handler bound to the runner's temporary stderr
    yield
    reset_logging()
