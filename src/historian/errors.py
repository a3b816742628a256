"""Exception hierarchy for historian."""

from __future__ import annotations

from pathlib import Path


class HistorianError(Exception):
    """Base class for all historian errors."""


class FetchError(HistorianError):
    """Retrieving history from a single host failed. Recoverable per host."""

    def __init__(self, host: str, message: str) -> None:
        self.host = host
        self.message = message
        super().__init__(f"{host}: {message}")


class LocalReadError(HistorianError):
    """A local history file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class NoHostsResolvedError(HistorianError):
    """No hosts were given and none could be discovered from local history."""
