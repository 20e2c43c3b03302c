"""Download functionality with retry and progress reporting."""

import logging
import time
from pathlib import Path

import httpx
from rich.progress import (
    Progress,
    BarColumn,
    DownloadColumn,
    TransferSpeedColumn,
    TimeRemainingColumn,
)

from pwshup.core.errors import DownloadError

logger = logging.getLogger(__name__)


def backoff_delay(attempt: int, initial_delay: float) -> float:
    """Delay before the retry that follows failed attempt number ``attempt``."""
    return initial_delay * 2 ** (attempt - 1)


def _fetch(
    client: httpx.Client,
    url: str,
    file_path: Path,
    show_progress: bool,
) -> None:
    """Make a single download attempt, overwriting ``file_path``."""
    with client.stream("GET", url) as response:
        if response.status_code != 200:
            raise DownloadError(
                f"Failed to download {url}: HTTP {response.status_code}"
            )

        total = int(response.headers.get("content-length", 0))

        if show_progress and total > 0:
            with Progress(
                "[progress.description]{task.description}",
                BarColumn(),
                DownloadColumn(),
                TransferSpeedColumn(),
                TimeRemainingColumn(),
            ) as progress:
                task = progress.add_task(f"Downloading {file_path.name}", total=total)

                with open(file_path, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=8192):
                        f.write(chunk)
                        progress.update(task, advance=len(chunk))
        else:
            with open(file_path, "wb") as f:
                for chunk in response.iter_bytes(chunk_size=8192):
                    f.write(chunk)


def download_file(
    url: str,
    dest: Path,
    max_retries: int = 10,
    initial_delay: float = 10.0,
    client: httpx.Client | None = None,
    sleep=time.sleep,
    show_progress: bool = True,
) -> Path:
    """Download a file from URL, retrying with exponential backoff.

    Args:
        url: URL to download from
        dest: File path to write to
        max_retries: Total number of attempts
        initial_delay: Seconds to wait after the first failed attempt; each
            further wait doubles
        client: HTTP client to use (one is created if omitted)
        sleep: Called with the delay in seconds between attempts
        show_progress: Whether to show progress bar

    Returns:
        Path to downloaded file

    Raises:
        DownloadError: every attempt failed; chained to the last error
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DownloadError(f"Failed to create {dest.parent}: {e}") from e

    own_client = client is None
    if own_client:
        client = httpx.Client(follow_redirects=True, timeout=60.0)

    last_error: Exception | None = None
    try:
        for attempt in range(1, max_retries + 1):
            try:
                _fetch(client, url, dest, show_progress)
                if attempt > 1:
                    logger.info("Downloaded %s on attempt %d", url, attempt)
                return dest
            except (DownloadError, httpx.HTTPError, OSError) as e:
                last_error = e
                if attempt == max_retries:
                    break
                delay = backoff_delay(attempt, initial_delay)
                logger.warning(
                    "Download attempt %d/%d failed: %s; retrying in %gs",
                    attempt,
                    max_retries,
                    e,
                    delay,
                )
                sleep(delay)
    finally:
        if own_client:
            client.close()

    raise DownloadError(
        f"Failed to download {url} after {max_retries} attempts: {last_error}",
        {"url": url, "attempts": max_retries},
    ) from last_error
