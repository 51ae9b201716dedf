"""Configuration loader for parser settings."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .parser_config import AppConfig, ParsingConfig

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or validated."""

    pass


class ConfigLoader:
    """Locate and validate the header parsing configuration."""

    DEFAULT_CONFIG_PATHS = [
        Path("~/.mailheaders/config.json"),
        Path("config/mailheaders.json"),
    ]

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Optional custom config file path
        """
        self.config_path = config_path

    def find_config_file(self) -> Optional[Path]:
        """Return the first existing config file, or None."""
        config_paths = [self.config_path] if self.config_path else self.DEFAULT_CONFIG_PATHS
        for config_path in config_paths:
            if config_path.expanduser().is_file():
                return config_path.expanduser()
        return None

    def load(self) -> ParsingConfig:
        """
        Load the parsing options to pass to ``HeaderCollection.parse``.

        Returns:
            ParsingConfig from the config file, or defaults if there is none

        Raises:
            ConfigError: If the file cannot be read or fails validation
        """
        config_path = self.find_config_file()
        if config_path is None:
            return ParsingConfig()

        try:
            config = AppConfig.model_validate_json(config_path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise ConfigError(f"Invalid config in {config_path}: {e}") from e

        logger.debug("Loaded configuration from %s", config_path)
        return config.parsing
