"""Exchange the names of two existing files or directories."""

import logging
import os
import uuid
from pathlib import Path

from fileops.exceptions import InvalidArgumentError, PathNotFoundError
from fileops.paths import PathLike, path_exists, require_path

logger = logging.getLogger(__name__)

TEMP_SUFFIX_PREFIX = ".tmp"


def _temp_path_for(path: Path) -> Path:
    # Random hex suffix so an existing "<name>.tmp" is never clobbered
    return path.with_name(f"{path.name}{TEMP_SUFFIX_PREFIX}{uuid.uuid4().hex}")


def swap_file_names(first: PathLike | None, second: PathLike | None) -> None:
    """
    Swap the names of two entries so each one's content ends up at the other's path.

    Uses three renames (first -> temp, second -> first, temp -> second), so
    no data is copied. If the second rename fails, the temp entry is renamed
    back to first before the error is raised, leaving both entries where they
    started. No lock is held across the renames; a concurrent process touching
    either path in between can still break the swap.

    Args:
        first: Path of the first entry (must exist)
        second: Path of the second entry (must exist)

    Raises:
        InvalidArgumentError: If either path is None or empty, or both are the same
        PathNotFoundError: If either entry does not exist
    """
    first = require_path(first, "first")
    second = require_path(second, "second")

    for path in (first, second):
        if not path_exists(path):
            raise PathNotFoundError(path, f"Cannot swap, path not found: {path}")

    # Compare entries, not symlink targets
    if os.path.samestat(os.lstat(first), os.lstat(second)):
        raise InvalidArgumentError("second", f"Cannot swap a path with itself: {first}")

    temp = _temp_path_for(first)
    os.rename(first, temp)

    try:
        os.rename(second, first)
    except OSError as e:
        logger.warning("Swap of %s and %s failed, restoring %s: %s", first, second, first, e)
        os.rename(temp, first)
        if isinstance(e, FileNotFoundError):
            raise PathNotFoundError(second, f"Cannot swap, path not found: {second}") from e
        raise

    os.rename(temp, second)
    logger.debug("Swapped %s and %s", first, second)
