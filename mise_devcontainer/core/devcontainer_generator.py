"""Devcontainer generation logic."""

import logging
from pathlib import Path
from typing import Optional

from .constants import DATA_DIR_NAME, DEVCONTAINER_DIR_NAME, DEVCONTAINER_FILE_NAME
from .devcontainer_template import generate_devcontainer, render_devcontainer
from .exceptions import DevcontainerWriteError
from ..models.devcontainer import DevcontainerTemplate
from ..utils.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class DevcontainerGenerator:
    """Generates devcontainer.json files for mise projects."""

    def __init__(self, project_root: Path):
        """Initialize generator."""
        self.project_root = project_root

    @property
    def output_path(self) -> Path:
        return self.project_root / DEVCONTAINER_DIR_NAME / DEVCONTAINER_FILE_NAME

    def build(self, name: Optional[str] = None, image: Optional[str] = None,
              mount_mise_data: bool = False) -> DevcontainerTemplate:
        """Build a template using the project configuration, if any."""
        config_manager = ConfigManager(self.project_root / DATA_DIR_NAME)
        config = config_manager.get_generator_config()
        if config:
            logger.debug(f"Using project configuration from {config_manager.config_file}")

        template = generate_devcontainer(name, image, mount_mise_data, config)
        logger.info(f"Generated devcontainer '{template.name}' from image {template.image}")
        return template

    def render(self, name: Optional[str] = None, image: Optional[str] = None,
               mount_mise_data: bool = False) -> str:
        """Build a template and render it as JSON."""
        return render_devcontainer(self.build(name, image, mount_mise_data))

    def write(self, template: DevcontainerTemplate) -> Path:
        """Write the template to .devcontainer/devcontainer.json."""
        path = self.output_path
        if path.exists():
            logger.info(f"Overwriting existing {path}")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_devcontainer(template))
        except OSError as e:
            raise DevcontainerWriteError(f"Failed to write {path}: {e}") from e
        logger.info(f"Wrote {path}")
        return path
