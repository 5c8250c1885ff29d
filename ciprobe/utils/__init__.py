"""Utilities for ciprobe."""

from .config_manager import ConfigManager, load_config
from .env_sources import (
    ChainedSource,
    DotenvSource,
    EnvironmentSource,
    KeyValueSource,
    MappingSource,
)

__all__ = [
    'ConfigManager',
    'load_config',
    'ChainedSource',
    'DotenvSource',
    'EnvironmentSource',
    'KeyValueSource',
    'MappingSource',
]
