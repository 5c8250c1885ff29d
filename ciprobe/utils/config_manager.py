"""Configuration loading utilities."""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from ..core.constants import DEFAULT_CONFIG_FILE
from ..core.task_state_store import TaskStateStore
from ..services.exceptions import ConfigNotFound, ConfigParseError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the task state configuration file."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config manager; defaults to the file in the working directory."""
        self.config_path = Path(config_path) if config_path else Path(DEFAULT_CONFIG_FILE)

    def load_store(self) -> TaskStateStore:
        """Read, parse and normalize the configuration.

        Raises:
            ConfigNotFound: If the file does not exist.
            ConfigParseError: If the file cannot be read, is not valid YAML or
                has the wrong shape.
        """
        if not self.config_path.exists():
            raise ConfigNotFound(f"Config file not found at {self.config_path}")

        logger.info(f"Loading config from {self.config_path}")
        try:
            content = self.config_path.read_text(encoding="utf-8")
            # BaseLoader keeps every scalar as its source text, so 3.10 stays "3.10"
            document = yaml.load(content, Loader=yaml.BaseLoader)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ConfigParseError(f"Failed to parse config file: {e}") from e

        return TaskStateStore.load(document)


def load_config(config_path: Optional[Union[str, Path]] = None) -> TaskStateStore:
    """Load the task state store from ``config_path``."""
    return ConfigManager(config_path).load_store()
