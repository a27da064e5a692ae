"""
fileops - A CLI tool for moving, copying, swapping and locking files.

This package contains the CLI commands for fileops, organized into separate
modules for better maintainability.
"""

import click

from fileops import __version__

# Import command modules (not the commands themselves) to preserve module access
from fileops.cli import (
    config as config_module,
    lock as lock_module,
    paths as paths_module,
    transfer as transfer_module,
)
from fileops.cli.utils import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fileops")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each file operation")
def main(verbose: bool) -> None:
    """fileops - Move and copy files with explicit conflict policies."""
    configure_logging(verbose)


# Register individual commands
main.add_command(transfer_module.move)
main.add_command(transfer_module.copy)
main.add_command(paths_module.swap)
main.add_command(paths_module.next_name)
main.add_command(paths_module.first_exists)

# Register command groups
main.add_command(lock_module.lock)
main.add_command(config_module.config)

__all__ = ["main"]
