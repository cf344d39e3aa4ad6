"""Allow running as ``python -m mise_devcontainer``."""

from mise_devcontainer.cli.main import cli


if __name__ == '__main__':
    cli()
