"""Shared pytest fixtures and test utilities for fileops."""

import os
from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner
from pytest import MonkeyPatch


@pytest.fixture(autouse=True, scope="function")
def isolate_app_config(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Automatically isolate app config directory for all tests.

    This fixture runs automatically for every test and ensures that tests
    never touch the real user app config directory.

    Returns:
        Path: The isolated temporary app config directory for the test.
    """
    isolated_config_dir = tmp_path / "app_config"
    isolated_config_dir.mkdir(exist_ok=True)

    monkeypatch.setenv("FILEOPS_APP_CONFIG_DIR", str(isolated_config_dir))

    return isolated_config_dir


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture for creating files under tmp_path.

    Returns:
        Callable: Function taking a relative name, optional content and an
        optional modification time (seconds since the epoch).
    """

    def _create(name: str, content: str = "content", mtime: float | None = None) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _create
