"""Configuration management for English Dictionary."""

from .config import DictionaryConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["DictionaryConfig", "ConfigManager", "create_default_config"]
