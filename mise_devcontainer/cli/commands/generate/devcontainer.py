"""Generate devcontainer command."""

import click

from mise_devcontainer.cli.helpers import fail, get_project_context

from ....core.constants import IMAGE_ENVVAR, NAME_ENVVAR
from ....core.devcontainer_generator import DevcontainerGenerator
from ....core.devcontainer_template import render_devcontainer
from ....core.exceptions import DevcontainerError


@click.command()
@click.option('-n', '--name', envvar=NAME_ENVVAR, help='The name of the devcontainer')
@click.option('-i', '--image', envvar=IMAGE_ENVVAR, help='The image to use for the devcontainer')
@click.option('-m', '--mount-mise-data', is_flag=True,
              help='Bind the mise-data-volume to the devcontainer')
@click.option('-w', '--write', is_flag=True,
              help='Write to .devcontainer/devcontainer.json instead of stdout')
def devcontainer(name, image, mount_mise_data, write):
    """Generate a devcontainer to execute mise

    \b
    Examples:
      $ mise-devcontainer generate devcontainer
      $ mise-devcontainer generate devcontainer --mount-mise-data --write
    """
    project_root, _ = get_project_context()
    generator = DevcontainerGenerator(project_root)

    try:
        template = generator.build(name=name, image=image, mount_mise_data=mount_mise_data)
        if write:
            path = generator.write(template)
            click.echo(f"Wrote {path}", err=True)
            return
    except DevcontainerError as e:
        fail(e)

    click.echo(render_devcontainer(template), nl=False)
