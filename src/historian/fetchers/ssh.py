"""Remote fetcher — runs ``cat`` on the host's bash history over ssh."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from historian.errors import FetchError
from historian.fetchers.base import Fetcher

DEFAULT_SSH_COMMAND = ("ssh",)
DEFAULT_REMOTE_COMMAND = "cat $HOME/.bash_history"


class SshFetcher(Fetcher):
    def __init__(
        self,
        command: Sequence[str] = DEFAULT_SSH_COMMAND,
        remote_command: str = DEFAULT_REMOTE_COMMAND,
    ) -> None:
        self._command = list(command)
        self._remote_command = remote_command

    def build_command(self, host: str) -> list[str]:
        return [*self._command, host, self._remote_command]

    def fetch(self, host: str) -> bytes:
        # No timeout: a hung connection holds its worker slot until it returns
        try:
            result = subprocess.run(self.build_command(host), capture_output=True, check=False)
        except (FileNotFoundError, OSError) as e:
            raise FetchError(host, str(e)) from e

        if result.returncode != 0:
            message = result.stderr.decode("utf-8", errors="replace").strip()
            raise FetchError(host, message or f"exit status {result.returncode}")

        return result.stdout
