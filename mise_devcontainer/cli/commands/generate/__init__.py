"""Generate command group."""

import click

from .devcontainer import devcontainer

__all__ = [
    'generate',
    'devcontainer',
]


@click.group()
def generate():
    """Generate files for mise-managed projects"""
    pass


generate.add_command(devcontainer)
