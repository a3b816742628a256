"""Local fetcher — reads the invoking user's bash and zsh history files."""

from __future__ import annotations

from pathlib import Path

from historian.errors import LocalReadError

DEFAULT_BASH_HISTORY_PATH = "~/.bash_history"
DEFAULT_ZSH_HISTORY_PATH = "~/.zsh_history"


class LocalFetcher:
    def __init__(
        self,
        bash_history_path: str = DEFAULT_BASH_HISTORY_PATH,
        zsh_history_path: str = DEFAULT_ZSH_HISTORY_PATH,
    ) -> None:
        self.bash_history_path = Path(bash_history_path).expanduser()
        self.zsh_history_path = Path(zsh_history_path).expanduser()

    def fetch_local(self) -> tuple[bytes, bytes]:
        """Return (bash history, zsh history). Both files must be readable."""
        return self._read(self.bash_history_path), self._read(self.zsh_history_path)

    def _read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise LocalReadError(path, e.strerror or str(e)) from e
