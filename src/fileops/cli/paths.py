"""Path commands for fileops CLI: swap, next-name and first-exists."""

import click

from fileops.cli.utils import report_errors
from fileops.file_system import FileSystem


@click.command()
@click.argument("first", type=click.Path())
@click.argument("second", type=click.Path())
@report_errors
def swap(first: str, second: str) -> None:
    """Swap the names of FIRST and SECOND."""
    FileSystem().swap_file_names(first, second)
    click.secho(f"✓ Swapped {first} <-> {second}", fg="green")


@click.command(name="next-name")
@click.argument("path", type=click.Path())
@report_errors
def next_name(path: str) -> None:
    """
    Print the first free name in the sequence of PATH.

    Prints PATH itself if nothing exists there, otherwise "name (2).ext",
    "name (3).ext" and so on.
    """
    click.echo(str(FileSystem().get_next_available_file_name(path)))


@click.command(name="first-exists")
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@report_errors
def first_exists(paths: tuple[str, ...]) -> None:
    """Print the first of PATHS that exists as a file or directory."""
    click.echo(str(FileSystem().first_exists(paths)))
