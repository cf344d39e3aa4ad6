"""Main CLI entry point for mise-devcontainer."""

import click

from mise_devcontainer import __version__

from ..utils.log import configure_logging
from .commands.config import config
from .commands.generate import generate


@click.group()
@click.version_option(version=__version__, prog_name='mise-devcontainer')
@click.option('--verbose', '-v', 'verbosity', count=True,
              help='Increase log verbosity (-v for INFO, -vv for DEBUG)')
def cli(verbosity):
    """mise-devcontainer - Generate devcontainer configurations for mise projects"""
    configure_logging(verbosity)


# Register commands
cli.add_command(generate)
cli.add_command(config)


if __name__ == '__main__':
    cli()
