"""Devcontainer template for mise projects."""

from typing import Optional

from .constants import (
    DEFAULT_IMAGE,
    DEFAULT_NAME,
    MISE_DATA_MOUNT_TARGET,
    MISE_DATA_VOLUME_ENV,
    MISE_DATA_VOLUME_NAME,
    MISE_FEATURE,
    MISE_VSCODE_EXTENSION,
)
from ..models.config import GeneratorConfig
from ..models.devcontainer import DevcontainerMount, DevcontainerTemplate


def generate_devcontainer(name: Optional[str] = None,
                          image: Optional[str] = None,
                          mount_mise_data: bool = False,
                          config: Optional[GeneratorConfig] = None) -> DevcontainerTemplate:
    """Generate a devcontainer template.

    Explicit arguments win over config values, which win over the defaults.
    """
    if config is None:
        config = GeneratorConfig()

    if name is None:
        name = config.name if config.name is not None else DEFAULT_NAME
    if image is None:
        image = config.image if config.image is not None else DEFAULT_IMAGE

    # The mise feature always comes first; config may override its options
    features = {MISE_FEATURE: {}}
    for feature_id, options in config.features.items():
        features[feature_id] = dict(options)

    extensions = [MISE_VSCODE_EXTENSION]
    for extension in config.extensions:
        if extension not in extensions:
            extensions.append(extension)

    mounts = []
    container_env = dict(config.container_env)
    if mount_mise_data:
        mounts.append(DevcontainerMount(
            source=MISE_DATA_VOLUME_NAME,
            target=MISE_DATA_MOUNT_TARGET,
            type="volume"
        ))
        container_env[MISE_DATA_VOLUME_ENV] = MISE_DATA_MOUNT_TARGET

    return DevcontainerTemplate(
        name=name,
        description=f"Development container for {name}",
        image=image,
        features=features,
        customizations={"vscode": {"extensions": extensions}},
        mounts=mounts,
        container_env=container_env
    )


def render_devcontainer(template: DevcontainerTemplate) -> str:
    """Render a template as devcontainer.json text."""
    return template.model_dump_json(indent=2) + "\n"
