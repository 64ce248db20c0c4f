"""
MockMaster Configuration

Settings for the command-line tools, read from a YAML or JSON file and
overridden by environment variables.

Precedence (highest first): command-line flags, environment variables,
config file, defaults.

Example mockmaster.yaml:
    scenariosDir: ./mocks
    baseUrl: https://api.example.com
    specs:
      - openapi/petstore.yaml
    logLevel: info
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union
from dataclasses import dataclass, field

import yaml

from ..common.errors import ConfigError

DEFAULT_CONFIG_FILES = ('mockmaster.yaml', 'mockmaster.yml', 'mockmaster.json')
DEFAULT_SCENARIOS_DIR = './scenarios'

# Environment variable -> config field
ENV_OVERRIDES = {
    'MOCKMASTER_SCENARIOS_DIR': 'scenarios_dir',
    'MOCKMASTER_BASE_URL': 'base_url',
    'MOCKMASTER_LOG_LEVEL': 'log_level',
}

# camelCase keys accepted in files
_KEY_ALIASES = {
    'scenariosDir': 'scenarios_dir',
    'baseUrl': 'base_url',
    'logLevel': 'log_level',
}


@dataclass
class MockMasterConfig:
    """Configuration for MockMaster tools."""

    scenarios_dir: str = DEFAULT_SCENARIOS_DIR
    base_url: Optional[str] = None
    specs: List[str] = field(default_factory=list)
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MockMasterConfig':
        """
        Create config from dictionary (camelCase or snake_case keys).

        Raises:
            ConfigError: If a value has the wrong type
        """
        normalized = {_KEY_ALIASES.get(k, k): v for k, v in data.items()}

        specs = normalized.get('specs') or []
        if isinstance(specs, str):
            specs = [specs]
        if not isinstance(specs, list):
            raise ConfigError(f"'specs' must be a list of paths, got {type(specs).__name__}")

        scenarios_dir = normalized.get('scenarios_dir') or DEFAULT_SCENARIOS_DIR
        if not isinstance(scenarios_dir, str):
            raise ConfigError(f"'scenariosDir' must be a string, got {type(scenarios_dir).__name__}")

        return cls(
            scenarios_dir=scenarios_dir,
            base_url=normalized.get('base_url'),
            specs=[str(s) for s in specs],
            log_level=normalized.get('log_level')
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'MockMasterConfig':
        """
        Load config from a YAML (.yaml/.yml) or JSON file.

        Raises:
            ConfigError: If the file is missing, unparsable or not a mapping
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"Invalid config file {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

    def apply_env(self, env: Optional[Mapping[str, str]] = None) -> 'MockMasterConfig':
        """Apply MOCKMASTER_* environment overrides in place and return self."""
        env = os.environ if env is None else env
        for var, attr in ENV_OVERRIDES.items():
            value = env.get(var)
            if value:
                setattr(self, attr, value)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            'scenariosDir': self.scenarios_dir,
            'baseUrl': self.base_url,
            'specs': list(self.specs),
            'logLevel': self.log_level,
        }


def find_config_file(directory: Union[str, Path] = '.') -> Optional[Path]:
    """Return the first default config file present in a directory."""
    for name in DEFAULT_CONFIG_FILES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None


def load_config(
    path: Optional[Union[str, Path]] = None,
    env: Optional[Mapping[str, str]] = None,
    directory: Union[str, Path] = '.'
) -> MockMasterConfig:
    """
    Load configuration.

    Args:
        path: Explicit config file (searched for in `directory` if omitted)
        env: Environment mapping (defaults to os.environ)
        directory: Where to look for a default config file

    Returns:
        MockMasterConfig with environment overrides applied
    """
    config_file = Path(path) if path else find_config_file(directory)
    config = MockMasterConfig.from_file(config_file) if config_file else MockMasterConfig()
    return config.apply_env(env)
