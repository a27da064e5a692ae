"""Unit tests for the FileSystem entry point."""

from pathlib import Path
from typing import Callable

import pytest

from fileops.exceptions import FileConflictError, UnsupportedPolicyError
from fileops.file_operations import ConflictPolicy
from fileops.file_system import FileSystem


class TestFileSystem:
    """Tests for FileSystem."""

    def test_default_policy_is_fail_on_conflict(self) -> None:
        assert FileSystem().default_policy is ConflictPolicy.FAIL_ON_CONFLICT

    def test_default_policy_from_string(self) -> None:
        assert FileSystem("skip").default_policy is ConflictPolicy.SKIP_ON_CONFLICT

    def test_unknown_default_policy_raises(self) -> None:
        with pytest.raises(UnsupportedPolicyError):
            FileSystem("sometimes")

    def test_move_uses_default_policy(self, make_file: Callable[..., Path]) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")

        result = FileSystem(ConflictPolicy.RENAME_WITH_NUMBER).move_file(source, target)

        assert result.resolved_destination.name == "target (2).txt"
        assert result.policy is ConflictPolicy.RENAME_WITH_NUMBER

    def test_explicit_policy_overrides_default(self, make_file: Callable[..., Path]) -> None:
        source = make_file("source.txt", "source content")
        target = make_file("target.txt", "target content")

        with pytest.raises(FileConflictError):
            FileSystem(ConflictPolicy.OVERWRITE).copy_file(
                source, target, ConflictPolicy.FAIL_ON_CONFLICT
            )

        assert target.read_text() == "target content"

    def test_copy_with_create_dirs(self, make_file: Callable[..., Path], tmp_path: Path) -> None:
        source = make_file("source.txt", "content")
        target = tmp_path / "nested" / "dir" / "copy.txt"

        result = FileSystem().copy_file(source, target, create_dirs=True)

        assert result.resolved_destination == target
        assert target.read_text() == "content"
        assert source.exists()

    def test_swap_file_names(self, make_file: Callable[..., Path]) -> None:
        first = make_file("a.txt", "first")
        second = make_file("b.txt", "second")

        FileSystem().swap_file_names(first, second)

        assert first.read_text() == "second"

    def test_path_lookups(self, make_file: Callable[..., Path], tmp_path: Path) -> None:
        existing = make_file("here.txt")
        file_system = FileSystem()

        assert file_system.first_exists([tmp_path / "nope", existing]) == existing
        assert [info.exists for info in file_system.exists([existing, tmp_path / "nope"])] == [
            True,
            False,
        ]
        assert file_system.get_path_exists(tmp_path / "x" / "y") == tmp_path
        assert file_system.is_file(existing) is True
        assert file_system.is_directory(tmp_path) is True
        assert file_system.get_next_available_file_name(existing) == tmp_path / "here (2).txt"
