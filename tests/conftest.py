"""Shared test fixtures."""

from __future__ import annotations

import threading
from datetime import date

import pytest

from historian.errors import FetchError
from historian.fetchers.base import Fetcher
from historian.models import TimeRange
from historian.reporting import Reporter


class RecordingReporter(Reporter):
    """Reporter that keeps every emitted line in memory."""

    def __init__(self) -> None:
        self.lines: list[tuple[str, str]] = []
        self.banners: list[str] = []

    def line(self, message: str, level: str, color: str = "green") -> None:
        self.lines.append((level, message))

    def banner(self, message: str, color: str = "cyan") -> None:
        self.banners.append(message)

    def messages(self, level: str) -> list[str]:
        return [message for lvl, message in self.lines if lvl == level]


class FakeFetcher(Fetcher):
    """Serves canned history per host; hosts mapped to an exception fail."""

    def __init__(self, histories: dict[str, str | Exception]) -> None:
        self._histories = histories
        self.fetched: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, host: str) -> bytes:
        with self._lock:
            self.fetched.append(host)
        history = self._histories[host]
        if isinstance(history, Exception):
            raise history
        return history.encode()


def bash_history(*items: tuple[int, str]) -> str:
    return "".join(f"#{epoch}\n{cmd}\n" for epoch, cmd in items)


def zsh_history(*items: tuple[int, str]) -> str:
    return "".join(f": {epoch}:0;{cmd}\n" for epoch, cmd in items)


@pytest.fixture
def day() -> TimeRange:
    """Collection window for 2026-02-06 in local time."""
    return TimeRange.for_date(date(2026, 2, 6))


@pytest.fixture
def base_epoch(day: TimeRange) -> int:
    """09:00 local on the fixture day."""
    return day.start_epoch + 9 * 3600


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def failing_host_error() -> FetchError:
    return FetchError("host-b", "ssh: connect to host host-b port 22: Connection refused")
