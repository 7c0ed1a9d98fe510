"""Configuration file loader for geokit settings."""

import os
from pathlib import Path
from typing import Dict, Any, Optional
import logging

import yaml

from geokit.core.constants import API_KEY_ENV_VAR, CONFIG_PATH_ENV_VAR, DEFAULT_CONFIG_PATH
from geokit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load geokit settings from the environment and ~/.geokit/config.yaml."""
    
    @staticmethod
    def config_path() -> Path:
        """Config file location, overridable through GEOKIT_CONFIG."""
        override = os.environ.get(CONFIG_PATH_ENV_VAR)
        if override:
            return Path(override).expanduser()
        return DEFAULT_CONFIG_PATH
    
    @staticmethod
    def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Load the YAML config file.
        
        A missing file yields an empty dict; a file that exists but cannot
        be parsed is a configuration error.
        """
        path = path or ConfigLoader.config_path()
        if not path.exists():
            logger.debug(f"No config file at {path}")
            return {}
        
        try:
            with open(path, encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config file {path}: {e}")
        
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping, got {type(config).__name__}"
            )
        
        logger.debug(f"Loaded configuration from {path}")
        return config
    
    @staticmethod
    def get_geocoding_settings(path: Optional[Path] = None) -> Dict[str, Any]:
        """Get the `geocoding` section, with the API key resolved from the environment first."""
        config = ConfigLoader.load_config(path)
        settings = dict(config.get("geocoding") or {})
        
        env_key = os.environ.get(API_KEY_ENV_VAR)
        if env_key:
            settings["api_key"] = env_key
        
        return settings
