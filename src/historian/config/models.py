"""Configuration dataclasses for historian."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from historian.fetchers.local import DEFAULT_BASH_HISTORY_PATH, DEFAULT_ZSH_HISTORY_PATH
from historian.fetchers.ssh import DEFAULT_REMOTE_COMMAND, DEFAULT_SSH_COMMAND
from historian.formatter import DEFAULT_TEMPLATE

DEFAULT_CONFIG_DIR = Path.home() / ".historian"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_DISCOVERY_DAYS = 30


@dataclass
class OutputConfig:
    """Output rendering configuration."""

    template: str = DEFAULT_TEMPLATE
    color: bool = True


@dataclass
class SshConfig:
    """Remote fetch configuration."""

    command: list[str] = field(default_factory=lambda: list(DEFAULT_SSH_COMMAND))
    remote_command: str = DEFAULT_REMOTE_COMMAND


@dataclass
class LocalHistoryConfig:
    """Local history file locations."""

    bash_history_path: str = DEFAULT_BASH_HISTORY_PATH
    zsh_history_path: str = DEFAULT_ZSH_HISTORY_PATH


@dataclass
class DiscoveryConfig:
    """Host discovery configuration."""

    days: int = DEFAULT_DISCOVERY_DAYS


@dataclass
class HistorianConfig:
    """Main historian configuration."""

    verbose: bool = False
    output: OutputConfig = field(default_factory=OutputConfig)
    ssh: SshConfig = field(default_factory=SshConfig)
    local: LocalHistoryConfig = field(default_factory=LocalHistoryConfig)
    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
