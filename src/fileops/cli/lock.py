"""Lock command group for advisory file locks."""

import click

from fileops.cli.utils import report_errors
from fileops.locking import is_locked, lock as lock_file, unlock


@click.group()
def lock() -> None:
    """Manage advisory .lock files."""
    pass


@lock.command(name="acquire")
@click.argument("path", type=click.Path())
@report_errors
def lock_acquire(path: str) -> None:
    """Lock PATH by creating PATH.lock."""
    info = lock_file(path)
    click.secho(f"✓ Locked {info.path} ({info.lock_path})", fg="green")


@lock.command(name="release")
@click.argument("path", type=click.Path())
@report_errors
def lock_release(path: str) -> None:
    """Unlock PATH by deleting PATH.lock, if present."""
    unlock(path)
    click.secho(f"✓ Unlocked {path}", fg="green")


@lock.command(name="status")
@click.argument("path", type=click.Path())
@report_errors
def lock_status(path: str) -> None:
    """Show whether PATH is locked."""
    if is_locked(path):
        click.echo(f"{path}: locked")
    else:
        click.echo(f"{path}: unlocked")
