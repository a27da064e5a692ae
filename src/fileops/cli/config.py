"""Config command group for managing fileops configuration.

This module contains commands for viewing the app configuration and setting
the default conflict policy used by 'fileops move' and 'fileops copy'.
"""

import click

from fileops.cli.utils import POLICY_CHOICES, report_errors
from fileops.config import get_app_config_path, get_default_policy, set_default_policy


@click.group()
def config() -> None:
    """Manage fileops configuration."""
    pass


@config.command(name="set-default-policy")
@click.argument("policy", type=click.Choice(POLICY_CHOICES))
@report_errors
def config_set_default_policy(policy: str) -> None:
    """Set the conflict policy used when --policy is not given.

    Arguments:
        POLICY: One of fail, skip, overwrite, rename, larger, newer

    Examples:
        fileops config set-default-policy rename
    """
    stored = set_default_policy(policy)
    click.secho(f"✓ Set default policy: {stored.value}", fg="green")


@config.command(name="show")
@report_errors
def config_show() -> None:
    """Show the config file location and current settings."""
    click.echo()
    click.secho("Config File:", bold=True)
    click.echo(f"  {get_app_config_path()}")
    click.echo()
    click.secho("Default Policy:", bold=True)
    click.echo(f"  {get_default_policy().value}")
    click.echo()
