"""Models for mise-devcontainer."""

from .config import GeneratorConfig
from .devcontainer import DevcontainerMount, DevcontainerTemplate

__all__ = [
    'GeneratorConfig',
    'DevcontainerMount',
    'DevcontainerTemplate'
]
