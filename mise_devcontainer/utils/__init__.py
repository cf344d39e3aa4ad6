"""Utilities for mise-devcontainer."""

from .config_manager import ConfigManager
from .log import configure_logging

__all__ = [
    'ConfigManager',
    'configure_logging'
]
