"""Configuration management"""

from .config_loader import ConfigError, ConfigLoader
from .parser_config import AppConfig, ParsingConfig

__all__ = ["ConfigError", "ConfigLoader", "AppConfig", "ParsingConfig"]
