"""
Command Line Interface for C2C.
"""
import click
from ..BUILDERS.compose_builder import ComposeBuilder
from ..CONVERTERS.to_yaml import ComposeYamlConverter
from ..RUNTIME.docker_inspector import DockerInspector
from ..errors import C2CError, OutputError

@click.command()
@click.argument('container', required=False)
@click.argument('output', required=False, type=click.Path(dir_okay=False))
@click.option('--host', '-H', default=None, help='Docker daemon socket to connect to (default: the DOCKER_HOST environment)')
@click.pass_context
def cli(ctx, container, output, host):
    """
    C2C - generate a minimal docker-compose service from a running container.

    Without CONTAINER, lists all containers. With OUTPUT, writes the compose
    file there instead of printing it.
    """
    ctx.ensure_object(dict)
    try:
        inspector = ctx.obj.get('inspector') or DockerInspector(base_url=host)
        if container is None:
            list_containers(inspector)
        else:
            generate(inspector, container, output)
    except C2CError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)

def list_containers(inspector):
    """Print the id and names of every container."""
    click.echo("CONTAINER ID\tNAMES")
    for summary in inspector.list_containers():
        click.echo(f"{summary.short_id}\t{', '.join(summary.names)}")

def generate(inspector, container_ref, output=None):
    """
    Inspect a container and its image, then print or write the compose file.
    """
    container = inspector.inspect_container(container_ref)
    image = inspector.inspect_image(container.image)

    builder = ComposeBuilder(volume_lookup=inspector.inspect_volume)
    converter = ComposeYamlConverter(builder.build(container, image))

    if output:
        try:
            converter.convert(output)
        except OSError as e:
            raise OutputError(f"Error writing to file {output}: {e}") from e
        click.echo(f"Compose file written to {output}")
    else:
        click.echo(converter.render())

def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
