"""Configuration management for historian."""

from __future__ import annotations

from historian.config.loader import load_config
from historian.config.models import (
    DEFAULT_CONFIG_PATH,
    DiscoveryConfig,
    HistorianConfig,
    LocalHistoryConfig,
    OutputConfig,
    SshConfig,
)
from historian.config.serializer import generate_config_toml

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "HistorianConfig",
    "OutputConfig",
    "SshConfig",
    "LocalHistoryConfig",
    "DiscoveryConfig",
    "load_config",
    "generate_config_toml",
]
