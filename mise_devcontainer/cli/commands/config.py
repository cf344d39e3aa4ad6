"""Configuration management commands for mise-devcontainer."""

import json

import click

from mise_devcontainer.cli.helpers import fail, get_config_manager, parse_feature_options

from ...core.exceptions import DevcontainerError
from ...models.config import GeneratorConfig


@click.group()
def config():
    """Manage project devcontainer defaults"""
    pass


@config.command()
@click.argument('value')
def name(value):
    """Set the default devcontainer name"""
    try:
        get_config_manager().set_default('name', value)
    except DevcontainerError as e:
        fail(e)
    click.echo(f"Set default name to {value}")


@config.command()
@click.argument('value')
def image(value):
    """Set the default devcontainer image"""
    try:
        get_config_manager().set_default('image', value)
    except DevcontainerError as e:
        fail(e)
    click.echo(f"Set default image to {value}")


@config.command()
@click.argument('key')
@click.argument('value')
def env(key, value):
    """Set environment variable for the container"""
    try:
        get_config_manager().update_env_vars({key: value})
    except DevcontainerError as e:
        fail(e)
    click.echo(f"Set environment variable: {key}={value}")


@config.command()
@click.argument('feature_id')
@click.option('--option', '-o', 'options', multiple=True, callback=parse_feature_options,
              help='Feature option as KEY=VALUE (repeatable)')
def feature(feature_id, options):
    """Add a devcontainer feature"""
    try:
        get_config_manager().add_feature(feature_id, options)
    except DevcontainerError as e:
        fail(e)
    click.echo(f"Added feature: {feature_id}")


@config.command()
@click.argument('extension_id')
def extension(extension_id):
    """Add a VS Code extension"""
    try:
        get_config_manager().add_extension(extension_id)
    except DevcontainerError as e:
        fail(e)
    click.echo(f"Added extension: {extension_id}")


@config.command()
def show():
    """Display current devcontainer configuration"""
    try:
        cfg = get_config_manager().get_generator_config()
    except DevcontainerError as e:
        fail(e)

    if not cfg:
        click.echo("No devcontainer configuration found")
        return

    click.echo("Devcontainer Configuration:")
    click.echo(json.dumps(cfg.model_dump(), indent=2))


@config.command()
def reset():
    """Reset devcontainer configuration to defaults"""
    try:
        get_config_manager().save_generator_config(GeneratorConfig())
    except DevcontainerError as e:
        fail(e)
    click.echo("Devcontainer configuration reset to defaults")
