import copy
import os
import yaml
from typing import Dict, Any, Optional
from pathlib import Path


DEFAULT_CONFIG: Dict[str, Any] = {
    'extraction': {'num_workers': 1},
    'input': {'encoding': 'utf-8'},
    'output': {'format': 'text', 'results_dir': 'results', 'logs_dir': 'logs'},
    'logging': {'level': 'INFO', 'to_file': False},
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration handler with defaults and environment variable support."""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self.config = _merge(copy.deepcopy(DEFAULT_CONFIG), self._load_config())
        self._resolve_paths()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            config = yaml.safe_load(f)

        return config or {}

    def _resolve_paths(self):
        """Resolve environment variables in input/output settings."""
        for section in ['input', 'output']:
            if section in self.config:
                for key, value in self.config[section].items():
                    if isinstance(value, str):
                        self.config[section][key] = os.path.expandvars(value)

    def get(self, key: str, default=None):
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = self.config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
            if value is None:
                return default
        return value

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def __getitem__(self, key):
        return self.config[key]

    def __repr__(self):
        return f"Config({self.config_path})"
