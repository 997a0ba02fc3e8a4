"""Configuration Management for the MatchEngine SDK

Holds the immutable client configuration record and loads it from
hierarchical YAML files with environment variable overrides.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

DEFAULT_TIMEOUT_MS = 30000
API_PREFIX = "/api/v1"


class ConfigurationError(ValueError):
    """Raised when configuration is missing or invalid."""
    pass


class ClientConfig(BaseModel):
    """Configuration for a MatchEngine client.

    Created once per client and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    api_token: SecretStr
    stripe_publishable_key: str
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v):
        """Normalize the base URL so paths can be appended directly"""
        v = v.rstrip('/')
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    @field_validator('timeout_ms', mode='before')
    @classmethod
    def apply_default_timeout(cls, v):
        return DEFAULT_TIMEOUT_MS if v is None else v

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url}{API_PREFIX}"


class ConfigManager:
    """Loads client configuration from files and the environment.

    Files are merged in order (later wins): ``default_config.yaml``,
    ``<environment>.yaml``, ``local.yaml``. Environment variables named
    ``MATCHENGINE_<FIELD>`` (e.g. ``MATCHENGINE_API_TOKEN``) override them.
    """

    ENV_PREFIX = "MATCHENGINE_"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional directory holding the YAML files
            environment: Environment name (development, staging, production)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('MATCHENGINE_ENV', 'development')
        self.logger = logging.getLogger(__name__)
        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".matchengine",
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml',
        }

    def load_config(self, **overrides: Any) -> ClientConfig:
        """Load and validate configuration.

        Args:
            **overrides: Explicit values that win over files and environment

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        config_data: Dict[str, Any] = {}

        for config_type, config_file in self.config_files.items():
            if config_file.exists():
                self.logger.debug(f"Loading {config_type} config from {config_file}")
                config_data.update(self._load_yaml_file(config_file))

        env_overrides = self._get_env_overrides()
        if env_overrides:
            self.logger.debug(f"Applying environment overrides: {list(env_overrides.keys())}")
            config_data.update(env_overrides)

        config_data.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return ClientConfig(**config_data)
        except ValidationError as e:
            self.logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load a YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping in {file_path}")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Only variables matching a configuration field are used, so
        MATCHENGINE_ENV does not leak into the record.
        """
        overrides = {}

        for field_name in ClientConfig.model_fields:
            value = os.environ.get(f"{self.ENV_PREFIX}{field_name.upper()}")
            if value is not None:
                overrides[field_name] = value

        return overrides
