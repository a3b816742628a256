"""Abstract base class for history fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Fetcher(ABC):
    """Retrieves raw bash history text from one host."""

    @abstractmethod
    def fetch(self, host: str) -> bytes:
        """Return the host's raw history text.

        Raises:
            FetchError: If the host's history could not be retrieved.
        """
        ...
