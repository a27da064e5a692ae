"""Integration tests for the 'fileops move' and 'fileops copy' commands."""

from pathlib import Path
from typing import Callable

from click.testing import CliRunner

from fileops.cli import main
from fileops.config import set_default_policy


class TestFileopsMove:
    """Integration tests for fileops move command."""

    def test_move_basic(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt", "content")
        target = tmp_path / "target.txt"

        result = cli_runner.invoke(main, ["move", str(source), str(target)])

        assert result.exit_code == 0
        assert "✓ Moved" in result.output
        assert not source.exists()
        assert target.read_text() == "content"

    def test_move_conflict_aborts(
        self, cli_runner: CliRunner, make_file: Callable[..., Path]
    ) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")

        result = cli_runner.invoke(main, ["move", str(source), str(target)])

        assert result.exit_code == 1
        assert "Target file already exists" in result.output
        assert source.exists()
        assert target.read_text() == "target content"

    def test_move_rename_policy(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")

        result = cli_runner.invoke(
            main, ["move", str(source), str(target), "--policy", "rename"]
        )

        assert result.exit_code == 0
        assert "target (2).txt" in result.output
        assert (tmp_path / "target (2).txt").read_text() == "source content"

    def test_move_skip_policy(
        self, cli_runner: CliRunner, make_file: Callable[..., Path]
    ) -> None:
        source = make_file("source.txt")
        target = make_file("target.txt", "target content")

        result = cli_runner.invoke(main, ["move", str(source), str(target), "-p", "skip"])

        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert source.exists()

    def test_move_larger_refused(
        self, cli_runner: CliRunner, make_file: Callable[..., Path]
    ) -> None:
        source = make_file("source.txt", "ab")
        target = make_file("target.txt", "abc")

        result = cli_runner.invoke(
            main, ["move", str(source), str(target), "--policy", "larger"]
        )

        assert result.exit_code == 1
        assert "exists and is not smaller" in result.output
        assert target.read_text() == "abc"

    def test_move_create_dirs(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt")
        target = tmp_path / "a" / "b" / "target.txt"

        result = cli_runner.invoke(main, ["move", str(source), str(target), "--create-dirs"])

        assert result.exit_code == 0
        assert target.exists()

    def test_move_invalid_policy(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt")

        result = cli_runner.invoke(
            main, ["move", str(source), str(tmp_path / "t.txt"), "--policy", "sometimes"]
        )

        assert result.exit_code == 2
        assert source.exists()

    def test_verbose_flag(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt")

        result = cli_runner.invoke(main, ["-v", "move", str(source), str(tmp_path / "t.txt")])

        assert result.exit_code == 0


class TestFileopsCopy:
    """Integration tests for fileops copy command."""

    def test_copy_basic(
        self, cli_runner: CliRunner, make_file: Callable[..., Path], tmp_path: Path
    ) -> None:
        source = make_file("source.txt", "content")
        target = tmp_path / "copy.txt"

        result = cli_runner.invoke(main, ["copy", str(source), str(target)])

        assert result.exit_code == 0
        assert "✓ Copied" in result.output
        assert source.read_text() == "content"
        assert target.read_text() == "content"

    def test_copy_uses_configured_default_policy(
        self, cli_runner: CliRunner, make_file: Callable[..., Path]
    ) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")
        set_default_policy("overwrite")

        result = cli_runner.invoke(main, ["copy", str(source), str(target)])

        assert result.exit_code == 0
        assert target.read_text() == "source content"

    def test_explicit_policy_beats_configured_default(
        self, cli_runner: CliRunner, make_file: Callable[..., Path]
    ) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")
        set_default_policy("overwrite")

        result = cli_runner.invoke(main, ["copy", str(source), str(target), "-p", "fail"])

        assert result.exit_code == 1
        assert target.read_text() == "target content"

    def test_copy_missing_source(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            main, ["copy", str(tmp_path / "missing.txt"), str(tmp_path / "copy.txt")]
        )

        assert result.exit_code == 1
        assert "Source file not found" in result.output
