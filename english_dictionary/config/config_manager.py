"""Configuration file loading."""

import json
import logging
from pathlib import Path

from .config import DictionaryConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manager for the user configuration file.

    Loads user configuration from a JSON file stored in the user's home
    directory. Falls back to the default configuration if the file doesn't
    exist or is invalid.
    """

    CONFIG_FILE = Path.home() / ".english_dictionary" / "config.json"

    @classmethod
    def load_config(cls) -> DictionaryConfig:
        """Load configuration from JSON file.

        Returns:
            Loaded configuration, or default configuration if file doesn't exist

        Note:
            Unknown keys are ignored so that older files keep loading after
            settings are removed.
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config()

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            if not isinstance(config_dict, dict):
                raise TypeError("config root must be an object")

            known = DictionaryConfig.__dataclass_fields__.keys()
            return DictionaryConfig(**{k: v for k, v in config_dict.items() if k in known})

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config()
