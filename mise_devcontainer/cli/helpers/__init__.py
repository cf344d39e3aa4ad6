"""CLI Helper Functions for mise-devcontainer.

Shared helpers for resolving the project context and turning
generator errors into consistent CLI output.
"""

import sys
from pathlib import Path
from typing import Dict, NoReturn, Tuple

import click

from mise_devcontainer.core.constants import DATA_DIR_NAME
from mise_devcontainer.core.exceptions import DevcontainerError
from mise_devcontainer.utils.config_manager import ConfigManager


def get_project_context() -> tuple[Path, Path]:
    """Get project root and data directory.

    Returns:
        Tuple of (project_root, data_dir)

    Note:
        Does not check if data_dir exists - the config file is optional.
    """
    project_root = Path.cwd()
    data_dir = project_root / DATA_DIR_NAME
    return project_root, data_dir


def get_config_manager() -> ConfigManager:
    """Initialize ConfigManager for the current project."""
    _, data_dir = get_project_context()
    return ConfigManager(data_dir)


def fail(error: DevcontainerError) -> NoReturn:
    """Report a generator error and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def parse_feature_options(ctx, param, value: Tuple[str, ...]) -> Dict[str, str]:
    """Click callback that parses repeated KEY=VALUE options into a dict."""
    options = {}
    for item in value:
        key, sep, option_value = item.partition('=')
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        options[key.strip()] = option_value
    return options
