"""
Configuration management system for PCSet.

Provides default settings and configuration override capabilities.
"""

import copy
import os
import json
from typing import Dict, Any, Optional
from pathlib import Path

from .exceptions import ConfigError


DEFAULT_CONFIG = {
    'alpha': {
        # Unparseable alpha symbols become 0 unless strict
        'strict_parsing': False
    },
    'display': {
        'notation': 'numeric',  # or 'alpha'
        'separator': ', '
    },
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'file_logging': False,
        'log_file': 'pcset.log'
    }
}


def _to_bool(value: str) -> bool:
    """Read a boolean flag from an environment string."""
    lowered = value.strip().lower()
    if lowered in ('1', 'true', 'yes', 'on'):
        return True
    if lowered in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f"Not a boolean: {value}")


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _to_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value}")
    return level


def _to_notation(value: str) -> str:
    notation = value.strip().lower()
    if notation not in ('numeric', 'alpha'):
        raise ValueError(f"Unknown notation: {value}")
    return notation


class ConfigManager:
    """Manages configuration settings with override capabilities."""
    
    def __init__(self):
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._load_environment_overrides()
    
    def _load_environment_overrides(self):
        """Load configuration overrides from environment variables."""
        config_file = os.getenv('PCSET_CONFIG')
        if config_file and Path(config_file).exists():
            self.load_from_file(config_file)
        
        env_overrides = {
            'PCSET_LOG_LEVEL': ('logging', 'level', _to_log_level),
            'PCSET_STRICT_ALPHA': ('alpha', 'strict_parsing', _to_bool),
            'PCSET_NOTATION': ('display', 'notation', _to_notation)
        }
        
        for env_var, (section, key, type_func) in env_overrides.items():
            value = os.getenv(env_var)
            if value is not None:
                try:
                    self._config[section][key] = type_func(value)
                except (ValueError, KeyError):
                    pass  # Invalid environment values keep the default
    
    def get(self, section: str, key: Optional[str] = None) -> Any:
        """Get configuration value(s)."""
        if key is None:
            return self._config.get(section, {})
        return self._config.get(section, {}).get(key)
    
    def set(self, section: str, key: str, value: Any) -> None:
        """Set configuration value."""
        if section not in self._config:
            self._config[section] = {}
        self._config[section][key] = value
    
    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary."""
        for section, values in config_dict.items():
            if section not in self._config:
                self._config[section] = {}
            if isinstance(values, dict):
                self._config[section].update(values)
            else:
                self._config[section] = values
    
    def load_from_file(self, config_path: str) -> None:
        """Load configuration from JSON file."""
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load config from {config_path}: {e}")
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        self.update(file_config)
    
    def save_to_file(self, config_path: str) -> None:
        """Save current configuration to JSON file."""
        Path(config_path).parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w') as f:
            json.dump(self._config, f, indent=2)
    
    def get_all(self) -> Dict[str, Any]:
        """Get complete configuration dictionary."""
        return copy.deepcopy(self._config)
    
    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        self._load_environment_overrides()


# Global configuration manager instance
_config_manager = ConfigManager()


def get_config(section: str, key: Optional[str] = None) -> Any:
    """Get configuration value(s) from global config manager."""
    return _config_manager.get(section, key)


def set_config(section: str, key: str, value: Any) -> None:
    """Set configuration value in global config manager."""
    _config_manager.set(section, key, value)


def update_config(config_dict: Dict[str, Any]) -> None:
    """Update global configuration with dictionary."""
    _config_manager.update(config_dict)


def load_config_file(config_path: str) -> None:
    """Load configuration from file into global config manager."""
    _config_manager.load_from_file(config_path)


def save_config_file(config_path: str) -> None:
    """Save global configuration to file."""
    _config_manager.save_to_file(config_path)


def get_all_config() -> Dict[str, Any]:
    """Get complete configuration dictionary."""
    return _config_manager.get_all()


def reset_config() -> None:
    """Reset global configuration to defaults."""
    _config_manager.reset_to_defaults()
