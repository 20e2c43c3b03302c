"""Tests for the retrying downloader."""

import httpx
import pytest

from pwshup.core.downloader import backoff_delay, download_file
from pwshup.core.errors import DownloadError


URL = "https://example.invalid/powershell-7.4.6-linux-x64.tar.gz"


class ScriptedTransport(httpx.MockTransport):
    """Fails with HTTP 503 until ``succeed_on`` attempts have been made."""

    def __init__(self, succeed_on: int | None):
        self.succeed_on = succeed_on
        self.calls = 0
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        if self.succeed_on is not None and self.calls >= self.succeed_on:
            return httpx.Response(200, content=b"payload")
        return httpx.Response(503, content=b"partial")


def test_backoff_delay_doubles():
    assert [backoff_delay(n, 10.0) for n in range(1, 5)] == [10.0, 20.0, 40.0, 80.0]


def test_success_first_try(tmp_path):
    transport = ScriptedTransport(succeed_on=1)
    delays = []
    dest = tmp_path / "out" / "pwsh.tar.gz"

    with httpx.Client(transport=transport) as client:
        result = download_file(URL, dest, client=client, sleep=delays.append, show_progress=False)

    assert result == dest
    assert dest.read_bytes() == b"payload"
    assert transport.calls == 1
    assert delays == []


def test_succeeds_on_third_attempt(tmp_path):
    transport = ScriptedTransport(succeed_on=3)
    delays = []
    dest = tmp_path / "pwsh.tar.gz"

    with httpx.Client(transport=transport) as client:
        download_file(
            URL, dest, max_retries=10, initial_delay=10.0,
            client=client, sleep=delays.append, show_progress=False,
        )

    assert transport.calls == 3
    assert delays == [10.0, 20.0]
    assert dest.read_bytes() == b"payload"


def test_exhausts_retries(tmp_path):
    transport = ScriptedTransport(succeed_on=None)
    delays = []

    with httpx.Client(transport=transport) as client:
        with pytest.raises(DownloadError, match="after 10 attempts") as excinfo:
            download_file(
                URL, tmp_path / "pwsh.tar.gz", max_retries=10, initial_delay=10.0,
                client=client, sleep=delays.append, show_progress=False,
            )

    assert transport.calls == 10
    assert delays == [10.0 * 2 ** n for n in range(9)]
    assert sum(delays) == 5110.0
    assert "HTTP 503" in str(excinfo.value.__cause__)


def test_transport_errors_are_retried(tmp_path):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, content=b"ok")

    delays = []
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        download_file(
            URL, tmp_path / "f", initial_delay=1.5,
            client=client, sleep=delays.append, show_progress=False,
        )

    assert len(calls) == 2
    assert delays == [1.5]


def test_single_attempt_does_not_sleep(tmp_path):
    transport = ScriptedTransport(succeed_on=None)
    delays = []

    with httpx.Client(transport=transport) as client:
        with pytest.raises(DownloadError):
            download_file(
                URL, tmp_path / "f", max_retries=1,
                client=client, sleep=delays.append, show_progress=False,
            )

    assert transport.calls == 1
    assert delays == []


def test_rejects_zero_retries(tmp_path):
    with pytest.raises(ValueError):
        download_file(URL, tmp_path / "f", max_retries=0)


def test_unwritable_destination_directory(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory")

    with pytest.raises(DownloadError, match="Failed to create"):
        download_file(URL, blocker / "pwsh.tar.gz", show_progress=False)
