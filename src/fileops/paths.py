"""Path validation and existence lookups shared by fileops operations."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fileops.exceptions import InvalidArgumentError, PathNotFoundError

logger = logging.getLogger(__name__)

PathLike = str | Path


@dataclass(frozen=True)
class ExistsInfo:
    """Whether a particular file or directory exists.

    Attributes:
        path: Path of the file or directory, as it was given.
        exists: True if a file or directory was found at path.
    """

    path: Path
    exists: bool


def require_path(value: PathLike | None, argument: str) -> Path:
    """
    Validate a required path argument and convert it to a Path.

    Args:
        value: The raw path value supplied by the caller
        argument: Name of the argument, used in the error message

    Returns:
        The value as a Path

    Raises:
        InvalidArgumentError: If value is None or an empty string
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise InvalidArgumentError(argument)
    return Path(value)


def path_exists(path: Path) -> bool:
    """Return True if any directory entry exists at path.

    Symlinks are not followed, so a dangling link counts as existing.
    """
    return path.is_symlink() or path.exists()


def first_exists(paths: Iterable[PathLike] | None) -> Path:
    """
    Return the first path that exists as either a file or a directory.

    Args:
        paths: Candidate paths, checked in order

    Returns:
        The first existing candidate

    Raises:
        InvalidArgumentError: If paths is None
        PathNotFoundError: If none of the candidates exist
    """
    if paths is None:
        raise InvalidArgumentError("paths")

    for candidate in paths:
        path = Path(candidate)
        if path_exists(path):
            logger.debug("First existing path: %s", path)
            return path

    raise PathNotFoundError(None, "None of the paths exist.")


def exists(paths: Iterable[PathLike] | None) -> list[ExistsInfo]:
    """
    Report which of the given paths exist.

    Args:
        paths: Paths to files or directories

    Returns:
        One ExistsInfo per input path, in input order

    Raises:
        InvalidArgumentError: If paths is None
    """
    if paths is None:
        raise InvalidArgumentError("paths")

    return [ExistsInfo(path=Path(p), exists=path_exists(Path(p))) for p in paths]


def get_path_exists(path: PathLike | None) -> Path:
    """
    Get the first part of a path that exists, walking up through its parents.

    Args:
        path: Path to a file or directory that may not exist

    Returns:
        path itself if it exists, otherwise its nearest existing ancestor

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If no part of the path exists
    """
    path = require_path(path, "path")

    if path_exists(path):
        return path

    for parent in path.absolute().parents:
        if parent.is_dir():
            return parent

    raise PathNotFoundError(path, "No part of the path exists.")


def is_directory(path: PathLike | None) -> bool:
    """
    Indicate whether path is a directory.

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If nothing exists at path
    """
    path = require_path(path, "path")
    if not path_exists(path):
        raise PathNotFoundError(path, f"Unable to find the path '{path}'.")
    return path.is_dir()


def is_file(path: PathLike | None) -> bool:
    """
    Indicate whether path is a file.

    Raises:
        InvalidArgumentError: If path is None or empty
        PathNotFoundError: If nothing exists at path
    """
    return not is_directory(path)
