"""Advisory file locking through sentinel ``.lock`` files.

A file counts as locked while a marker named ``<file>.lock`` exists next to
it. Only callers that go through this module honour the lock; nothing stops
other code from modifying the target directly.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from fileops.exceptions import AlreadyLockedError, PathNotFoundError
from fileops.paths import PathLike, require_path

logger = logging.getLogger(__name__)

LOCK_FILE_EXTENSION = ".lock"


@dataclass(frozen=True)
class FileLockInfo:
    """A file and its corresponding lock marker.

    Attributes:
        path: The locked file.
        lock_path: The marker whose existence means path is locked.
    """

    path: Path
    lock_path: Path

    @classmethod
    def for_path(cls, path: Path) -> "FileLockInfo":
        """Build lock info for path, deriving the marker path from it."""
        return cls(path=path, lock_path=Path(f"{path}{LOCK_FILE_EXTENSION}"))


def _existing_file(path: PathLike | None) -> Path:
    path = require_path(path, "path")
    if not path.is_file():
        raise PathNotFoundError(path, f"File does not exist: {path}")
    return path


def lock(path: PathLike | None) -> FileLockInfo:
    """
    Lock a file by creating its .lock marker.

    Marker creation uses exclusive-create mode, so of two concurrent callers
    only one can succeed.

    Args:
        path: File to lock (must exist)

    Returns:
        FileLockInfo for the locked file

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If the file does not exist
        AlreadyLockedError: If the marker already exists
    """
    info = FileLockInfo.for_path(_existing_file(path))

    try:
        info.lock_path.open("x").close()
    except FileExistsError as e:
        raise AlreadyLockedError(info.path, info.lock_path) from e

    logger.debug("Locked %s", info.path)
    return info


def is_locked(path: PathLike | None) -> bool:
    """
    Determine whether a file is locked.

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If the file does not exist
    """
    info = FileLockInfo.for_path(_existing_file(path))
    return info.lock_path.exists()


def unlock(path: PathLike | None) -> None:
    """
    Unlock a file by deleting its .lock marker, if there is one.

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If the file does not exist
    """
    info = FileLockInfo.for_path(_existing_file(path))
    info.lock_path.unlink(missing_ok=True)
    logger.debug("Unlocked %s", info.path)


@contextmanager
def file_lock(path: PathLike | None) -> Iterator[FileLockInfo]:
    """Hold the lock on path for the duration of a with block."""
    info = lock(path)
    try:
        yield info
    finally:
        info.lock_path.unlink(missing_ok=True)
        logger.debug("Unlocked %s", info.path)
