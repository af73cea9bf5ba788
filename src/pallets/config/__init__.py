"""Configuration models and loaders for pallets."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import ArchiveConfig, PalletsConfig, RuntimeConfig

__all__ = [
    "ArchiveConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "PalletsConfig",
    "RuntimeConfig",
    "dump_example_config",
    "load_config",
]
