import logging
import os
from typing import Any, Dict

import yaml

from keyfeedback.paths import get_resource_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/keyboard_config.yml"


class ConfigLoader:
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._instance._load_config(get_resource_path(DEFAULT_CONFIG_PATH))
        return cls._instance

    def _load_config(self, config_path: str):
        try:
            if os.path.exists(config_path):
                with open(config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f) or {}
                if isinstance(loaded, dict):
                    self._config = loaded
                else:
                    logger.error(f"Config root must be a mapping, got {type(loaded).__name__}: {config_path}")
                    self._config = {}
            else:
                logger.error(f"Config file not found: {config_path}")
                self._config = {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load config: {e}")
            self._config = {}

    def reload(self, config_path: str = None):
        """Re-read the config, optionally from another file."""
        self._load_config(config_path or get_resource_path(DEFAULT_CONFIG_PATH))

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        return self._config.get(key, default)
