"""Devcontainer configuration models."""

from typing import Dict, List
from pydantic import BaseModel, Field


class DevcontainerMount(BaseModel):
    """A volume or bind mount attached to the devcontainer."""
    source: str
    target: str
    type: str = "volume"


class DevcontainerTemplate(BaseModel):
    """Generated devcontainer.json contents.

    Field order is the key order of the rendered JSON.
    """
    name: str
    description: str
    image: str
    features: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    customizations: Dict[str, Dict[str, List[str]]] = Field(default_factory=dict)
    mounts: List[DevcontainerMount] = Field(default_factory=list)
    container_env: Dict[str, str] = Field(default_factory=dict)
