"""Move and copy commands for fileops CLI."""

import click

from fileops.cli.utils import POLICY_CHOICES, echo_result, report_errors, resolve_policy
from fileops.file_system import FileSystem

policy_option = click.option(
    "--policy",
    "-p",
    type=click.Choice(POLICY_CHOICES),
    default=None,
    help="What to do if the destination exists (default: configured policy, else 'fail')",
)

create_dirs_option = click.option(
    "--create-dirs",
    is_flag=True,
    default=False,
    help="Create missing destination directories",
)


@click.command()
@click.argument("source", type=click.Path())
@click.argument("destination", type=click.Path())
@policy_option
@create_dirs_option
@report_errors
def move(source: str, destination: str, policy: str | None, create_dirs: bool) -> None:
    """
    Move SOURCE to DESTINATION.

    Policies:
        fail: error if DESTINATION exists
        skip: leave DESTINATION untouched
        overwrite: replace DESTINATION
        rename: move to "name (2).ext", "name (3).ext", ...
        larger: replace DESTINATION only if SOURCE is bigger
        newer: replace DESTINATION only if SOURCE was modified later

    Examples:
        - 'fileops move a.txt backup/a.txt'
        - 'fileops move a.txt backup/a.txt --policy rename'
    """
    file_system = FileSystem(resolve_policy(policy))
    result = file_system.move_file(source, destination, create_dirs=create_dirs)
    echo_result("Moved", source, result)


@click.command()
@click.argument("source", type=click.Path())
@click.argument("destination", type=click.Path())
@policy_option
@create_dirs_option
@report_errors
def copy(source: str, destination: str, policy: str | None, create_dirs: bool) -> None:
    """
    Copy SOURCE to DESTINATION.

    Accepts the same policies as 'fileops move'.

    Examples:
        - 'fileops copy report.pdf archive/report.pdf --policy newer'
    """
    file_system = FileSystem(resolve_policy(policy))
    result = file_system.copy_file(source, destination, create_dirs=create_dirs)
    echo_result("Copied", source, result)
