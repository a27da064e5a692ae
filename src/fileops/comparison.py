"""Size and modification-time comparisons between a source and a destination."""

from pathlib import Path

from fileops.exceptions import PathNotFoundError

MISSING_FILE_SIZE = -1


def _size(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError as e:
        raise PathNotFoundError(path, f"Source file not found: {path}") from e


def _size_or_missing(path: Path) -> int:
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return MISSING_FILE_SIZE


def is_source_bigger(source: Path, destination: Path) -> bool:
    """
    Indicate whether source is bigger than destination.

    A missing destination counts as size -1, so any existing source is bigger.

    Raises:
        PathNotFoundError: If source does not exist
    """
    return _size(source) > _size_or_missing(destination)


def is_source_bigger_or_equal(source: Path, destination: Path) -> bool:
    """
    Indicate whether source is bigger than or equal in size to destination.

    Raises:
        PathNotFoundError: If source does not exist
    """
    return _size(source) >= _size_or_missing(destination)


def is_source_modified_more_recently(source: Path, destination: Path) -> bool:
    """
    Indicate whether source was modified more recently than destination.

    A missing destination is treated as older than any source.

    Raises:
        PathNotFoundError: If source does not exist
    """
    if not source.is_file():
        raise PathNotFoundError(source, f"Source file not found: {source}")

    try:
        destination_mtime = destination.stat().st_mtime_ns
    except FileNotFoundError:
        return True

    return source.stat().st_mtime_ns > destination_mtime
