"""
Shared CLI utility functions for fileops.

This module contains helpers used across multiple CLI commands: error
reporting, logging setup and conflict policy resolution.
"""

import logging

import click
import yaml

from fileops.config import get_default_policy
from fileops.exceptions import FileOperationError
from fileops.file_operations import ConflictPolicy, OperationResult

POLICY_CHOICES = [policy.value for policy in ConflictPolicy]


def configure_logging(verbose: bool) -> None:
    """Send library log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def report_errors(f):
    """Decorator turning library errors into a red message and an aborted command.

    The underlying exception message is printed to stderr and the command
    exits with status 1 through click.Abort.
    """
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (FileOperationError, OSError) as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            raise click.Abort()
        except yaml.YAMLError as e:
            click.secho(f"Error: Invalid config file: {e}", fg="red", err=True)
            raise click.Abort()

    # Preserve function metadata for Click
    wrapper.__name__ = f.__name__
    wrapper.__doc__ = f.__doc__
    return wrapper


def resolve_policy(policy: str | None) -> ConflictPolicy:
    """Use the given policy, falling back to the configured default.

    Raises:
        UnsupportedPolicyError: If the configured default is not a known policy.
    """
    if policy is not None:
        return ConflictPolicy.coerce(policy)
    return get_default_policy()


def echo_result(action: str, source: str, result: OperationResult) -> None:
    """Print the outcome of a move or copy."""
    if result.skipped:
        click.secho(
            f"Skipped: {result.resolved_destination} already exists", fg="yellow"
        )
        return

    click.secho(f"✓ {action} {source} -> {result.resolved_destination}", fg="green")
