"""TOML serialization for historian configuration."""

from __future__ import annotations

from historian.config.models import HistorianConfig


def _toml_string(value: str) -> str:
    """Quote a value as a TOML basic string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def generate_config_toml(config: HistorianConfig) -> str:
    """Generate TOML string from config for writing to file."""
    command_toml = ", ".join(_toml_string(part) for part in config.ssh.command)

    return f"""[general]
verbose = {str(config.verbose).lower()}

[output]
template = {_toml_string(config.output.template)}
color = {str(config.output.color).lower()}

[ssh]
command = [{command_toml}]
remote_command = {_toml_string(config.ssh.remote_command)}

[local]
bash_history_path = {_toml_string(config.local.bash_history_path)}
zsh_history_path = {_toml_string(config.local.zsh_history_path)}

[discovery]
days = {config.discovery.days}
"""
