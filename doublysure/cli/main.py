"""doublysure CLI entry point - assembles all commands."""
import click

from doublysure import __version__

from .run_cmd import run


@click.group()
@click.version_option(version=__version__)
def cli():
    """doublysure: make sure, sure, and doubly sure."""
    pass


cli.add_command(run)


if __name__ == "__main__":
    cli()
