"""Load and validate historian configuration from TOML files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from historian.config.models import (
    DEFAULT_CONFIG_PATH,
    DiscoveryConfig,
    HistorianConfig,
    LocalHistoryConfig,
    OutputConfig,
    SshConfig,
)
from historian.config.validation import ConfigValidator


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> HistorianConfig:
    """Load config from TOML file, validate, and return."""
    if not path.exists():
        msg = f"Config not found at {path}. Run 'historian --init' to create one."
        raise FileNotFoundError(msg)

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = _from_dict(data)

    validator = ConfigValidator()
    errors = validator.validate(config)
    if errors:
        error_msgs = "\n".join(f"  {e.path}: {e.message}" for e in errors)
        msg = f"Config validation failed:\n{error_msgs}"
        raise ValueError(msg)

    return config


def _from_dict(data: dict[str, Any]) -> HistorianConfig:
    """Convert TOML dict to HistorianConfig dataclass."""
    defaults = HistorianConfig()
    general = data.get("general", {})
    output_data = data.get("output", {})
    ssh_data = data.get("ssh", {})
    local_data = data.get("local", {})
    discovery_data = data.get("discovery", {})

    return HistorianConfig(
        verbose=general.get("verbose", defaults.verbose),
        output=OutputConfig(
            template=output_data.get("template", defaults.output.template),
            color=output_data.get("color", defaults.output.color),
        ),
        ssh=SshConfig(
            command=_as_argv(ssh_data.get("command", defaults.ssh.command)),
            remote_command=ssh_data.get("remote_command", defaults.ssh.remote_command),
        ),
        local=LocalHistoryConfig(
            bash_history_path=local_data.get(
                "bash_history_path", defaults.local.bash_history_path
            ),
            zsh_history_path=local_data.get("zsh_history_path", defaults.local.zsh_history_path),
        ),
        discovery=DiscoveryConfig(
            days=discovery_data.get("days", defaults.discovery.days),
        ),
    )


def _as_argv(value: Any) -> list[Any]:
    """Accept ssh.command as either a string or an argument list."""
    if isinstance(value, str):
        return value.split()
    return list(value)
