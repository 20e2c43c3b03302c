"""Resolve, download and install a PowerShell release."""

import logging
import time
from datetime import datetime

import httpx

from pwshup.core import cache
from pwshup.core.config import SetupConfig
from pwshup.core.downloader import download_file
from pwshup.core.errors import DownloadError, InstallVerificationError
from pwshup.core.extractor import install_archive
from pwshup.core.github import GitHubClient
from pwshup.core.manifest import Receipt, calculate_sha256, write_receipt
from pwshup.core.platform import detect_platform, pattern_for, select_asset
from pwshup.core.resolver import resolve_release
from pwshup.models.install import ResolvedResult
from pwshup.models.release import Release
from pwshup.models.request import VersionRequest

logger = logging.getLogger(__name__)


def fetch_catalog(config: SetupConfig, transport: httpx.BaseTransport | None = None) -> list[Release]:
    """Fetch the release list for the configured repository."""
    with GitHubClient(config.repo, token=config.token, transport=transport) as client:
        return client.get_releases()


def setup_powershell(
    request: VersionRequest,
    config: SetupConfig,
    *,
    catalog: list[Release] | None = None,
    http_client: httpx.Client | None = None,
    sleep=time.sleep,
    show_progress: bool = True,
) -> ResolvedResult:
    """Install the release a request resolves to, or reuse a cached install.

    Args:
        request: Version to install
        config: Run configuration
        catalog: Pre-fetched releases; fetched from GitHub if omitted
        http_client: Client used for the artifact download
        sleep: Passed to the downloader for backoff waits
        show_progress: Whether to show a download progress bar

    Raises:
        SetupError: any stage failed; nothing is retried except the download
    """
    target = detect_platform(config.architecture)
    logger.info("Platform: %s", target)

    if catalog is None:
        catalog = fetch_catalog(config)
    release = resolve_release(request, catalog, lts_prefix=config.lts_prefix)
    version = release.version
    logger.info("Resolved '%s' to %s", request, release.tag_name)

    location = cache.locate(config, target.os_family, version)
    if not config.force and cache.is_installed(location, target.os_family, strict=config.strict):
        logger.info("PowerShell %s already installed at %s", version, location.path)
        return ResolvedResult(
            version=version, path=location.path, tag=release.tag_name, cached=True
        )

    pattern = pattern_for(target.os_family, target.arch)
    asset = select_asset(release, pattern)
    logger.info("Selected asset %s (%d bytes)", asset.name, asset.size)

    try:
        config.ensure_dirs()
    except OSError as e:
        raise DownloadError(f"Failed to create {config.temp_dir}: {e}") from e
    archive_path = config.temp_dir / asset.name
    try:
        download_file(
            asset.download_url,
            archive_path,
            max_retries=config.max_retries,
            initial_delay=config.initial_delay,
            client=http_client,
            sleep=sleep,
            show_progress=show_progress,
        )
        install_dir = install_archive(archive_path, location, target.os_family)
    finally:
        archive_path.unlink(missing_ok=True)

    exe = install_dir / cache.executable_name(target.os_family)
    if not exe.is_file():
        raise InstallVerificationError(
            f"{exe.name} not found in {install_dir} after extracting {asset.name}",
            {"path": str(install_dir), "asset": asset.name},
        )

    try:
        write_receipt(
            install_dir,
            Receipt(
                version=version,
                tag=release.tag_name,
                asset=asset.name,
                os=target.os_family,
                arch=target.arch,
                executable=exe.name,
                sha256=calculate_sha256(exe),
                installed_at=datetime.now(),
            ),
        )
    except OSError as e:
        raise InstallVerificationError(
            f"Failed to record install receipt in {install_dir}: {e}",
            {"path": str(install_dir)},
        ) from e

    logger.info("Installed PowerShell %s to %s", version, install_dir)
    return ResolvedResult(version=version, path=install_dir, tag=release.tag_name)
