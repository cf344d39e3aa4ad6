"""Configuration models for mise-devcontainer."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Per-project defaults for devcontainer generation."""
    name: Optional[str] = None
    image: Optional[str] = None
    features: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    container_env: Dict[str, str] = Field(default_factory=dict)
    extensions: List[str] = Field(default_factory=list)
