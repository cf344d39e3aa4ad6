"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..core.exceptions import ConfigError
from ..models.config import GeneratorConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages per-project generator configuration."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = data_dir
        self.config_file = data_dir / CONFIG_FILE_NAME

    def save_generator_config(self, config: GeneratorConfig):
        """Save generator configuration."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self.config_file.write_text(config.model_dump_json(indent=2))
        except OSError as e:
            raise ConfigError(f"Failed to write {self.config_file}: {e}") from e
        logger.debug(f"Saved configuration to {self.config_file}")

    def get_generator_config(self) -> Optional[GeneratorConfig]:
        """Load generator configuration, or None when no config file exists."""
        if not self.config_file.exists():
            return None
        try:
            data = json.loads(self.config_file.read_text())
            return GeneratorConfig(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            raise ConfigError(f"Invalid configuration file {self.config_file}: {e}") from e

    def set_default(self, field: str, value: str):
        """Set the default name or image."""
        if field not in ('name', 'image'):
            raise ValueError(f"Unknown default: {field}")
        config = self.get_generator_config() or GeneratorConfig()
        setattr(config, field, value)
        self.save_generator_config(config)

    def update_env_vars(self, env_vars: Dict[str, str]):
        """Update container environment variables."""
        config = self.get_generator_config() or GeneratorConfig()
        config.container_env.update(env_vars)
        self.save_generator_config(config)

    def add_feature(self, feature_id: str, options: Optional[Dict[str, str]] = None):
        """Add or replace a devcontainer feature."""
        config = self.get_generator_config() or GeneratorConfig()
        config.features[feature_id] = dict(options or {})
        self.save_generator_config(config)

    def add_extension(self, extension: str):
        """Add a VS Code extension to the config."""
        config = self.get_generator_config() or GeneratorConfig()
        if extension not in config.extensions:
            config.extensions.append(extension)
        self.save_generator_config(config)
