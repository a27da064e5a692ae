"""Entry point bundling the fileops operations behind one object."""

from collections.abc import Iterable
from pathlib import Path

from fileops import naming, paths, swap
from fileops.file_operations import (
    DEFAULT_POLICY,
    ConflictPolicy,
    OperationResult,
    copy_file,
    move_file,
)
from fileops.paths import ExistsInfo, PathLike


class FileSystem:
    """File system operations with a default conflict policy.

    Holds no state besides the default policy; every call works only on the
    paths it is given.
    """

    def __init__(self, default_policy: ConflictPolicy | str = DEFAULT_POLICY) -> None:
        self.default_policy = ConflictPolicy.coerce(default_policy)

    def _policy(self, policy: ConflictPolicy | str | None) -> ConflictPolicy:
        if policy is None:
            return self.default_policy
        return ConflictPolicy.coerce(policy)

    def move_file(
        self,
        source: PathLike,
        destination: PathLike,
        policy: ConflictPolicy | str | None = None,
        create_dirs: bool = False,
    ) -> OperationResult:
        """Move source to destination, applying policy if destination exists."""
        return move_file(source, destination, self._policy(policy), create_dirs=create_dirs)

    def copy_file(
        self,
        source: PathLike,
        destination: PathLike,
        policy: ConflictPolicy | str | None = None,
        create_dirs: bool = False,
    ) -> OperationResult:
        """Copy source to destination, applying policy if destination exists."""
        return copy_file(source, destination, self._policy(policy), create_dirs=create_dirs)

    def swap_file_names(self, first: PathLike, second: PathLike) -> None:
        swap.swap_file_names(first, second)

    def get_next_available_file_name(self, path: PathLike) -> Path:
        return naming.get_next_available_file_name(path)

    def first_exists(self, candidates: Iterable[PathLike]) -> Path:
        return paths.first_exists(candidates)

    def exists(self, candidates: Iterable[PathLike]) -> list[ExistsInfo]:
        return paths.exists(candidates)

    def get_path_exists(self, path: PathLike) -> Path:
        return paths.get_path_exists(path)

    def is_file(self, path: PathLike) -> bool:
        return paths.is_file(path)

    def is_directory(self, path: PathLike) -> bool:
        return paths.is_directory(path)
