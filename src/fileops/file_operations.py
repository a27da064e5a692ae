"""File operations for fileops - moving and copying files with conflict policies."""

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from fileops.comparison import is_source_bigger, is_source_modified_more_recently
from fileops.exceptions import (
    FileConflictError,
    FileOperationError,
    PathNotFoundError,
    PreconditionFailedError,
    UnsupportedPolicyError,
)
from fileops.naming import get_next_available_file_name
from fileops.paths import PathLike, path_exists, require_path

logger = logging.getLogger(__name__)


class ConflictPolicy(str, Enum):
    """Strategy for handling file conflicts when the destination already exists."""

    FAIL_ON_CONFLICT = "fail"  # Raise FileConflictError
    SKIP_ON_CONFLICT = "skip"  # Leave both files unchanged
    OVERWRITE = "overwrite"  # Replace destination with source
    RENAME_WITH_NUMBER = "rename"  # Write to "name (2).ext" etc.
    OVERWRITE_IF_SOURCE_LARGER = "larger"  # Replace only if source has more bytes
    OVERWRITE_IF_SOURCE_NEWER = "newer"  # Replace only if source was modified later

    @classmethod
    def coerce(cls, value: "ConflictPolicy | str") -> "ConflictPolicy":
        """Convert a policy or its string value to a ConflictPolicy.

        Raises:
            UnsupportedPolicyError: If value names no known policy
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedPolicyError(value) from None


DEFAULT_POLICY = ConflictPolicy.FAIL_ON_CONFLICT

# Low-level primitive moving or copying a single file to a free target path.
Transfer = Callable[[Path, Path], None]


@dataclass(frozen=True)
class OperationRequest:
    """A single move or copy request."""

    source: PathLike
    destination: PathLike
    policy: ConflictPolicy | str = DEFAULT_POLICY


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a move or copy request.

    Attributes:
        resolved_destination: The path actually written to. Differs from the
            requested destination under RENAME_WITH_NUMBER.
        policy: The policy that was applied.
        skipped: True if nothing was moved or copied.
    """

    resolved_destination: Path
    policy: ConflictPolicy
    skipped: bool = False


def _check_transfer(source: Path, target: Path) -> None:
    if not source.exists():
        raise PathNotFoundError(source, f"Source file not found: {source}")

    if not source.is_file():
        raise FileOperationError(f"Source is not a file: {source}")

    if path_exists(target):
        raise FileConflictError(source, target)

    if not target.parent.is_dir():
        raise FileOperationError(f"Target directory does not exist: {target.parent}")


def move_transfer(source: Path, target: Path) -> None:
    """
    Move source to target, which must not exist.

    Raises:
        PathNotFoundError: If source doesn't exist
        FileConflictError: If target already exists
        FileOperationError: For other file operation errors
        PermissionError: If insufficient permissions
    """
    _check_transfer(source, target)

    try:
        # shutil.move handles cross-filesystem moves automatically
        shutil.move(str(source), str(target))
    except PermissionError as e:
        raise PermissionError(f"Permission denied moving {source} to {target}: {e}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to move {source} to {target}: {e}") from e


def copy_transfer(source: Path, target: Path) -> None:
    """
    Copy source to target, which must not exist.

    The target is opened with exclusive creation, so a file appearing at
    target after the existence check still raises FileConflictError. A
    partially written target is removed if the copy fails.

    Raises:
        PathNotFoundError: If source doesn't exist
        FileConflictError: If target already exists
        FileOperationError: For other file operation errors
        PermissionError: If insufficient permissions
    """
    _check_transfer(source, target)

    try:
        with source.open("rb") as src:
            try:
                dst = target.open("xb")
            except FileExistsError as e:
                raise FileConflictError(source, target) from e

            try:
                with dst:
                    shutil.copyfileobj(src, dst)
            except Exception:
                target.unlink(missing_ok=True)
                raise

        shutil.copystat(source, target)
    except PermissionError as e:
        raise PermissionError(f"Permission denied copying {source} to {target}: {e}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to copy {source} to {target}: {e}") from e


def _performed(request: OperationRequest, destination: Path) -> OperationResult:
    return OperationResult(resolved_destination=destination, policy=request.policy)


def _replace(source: Path, destination: Path, transfer: Transfer) -> None:
    """Delete an existing destination and transfer source into its place."""
    if not source.exists():
        raise PathNotFoundError(source, f"Source file not found: {source}")

    if not source.is_file():
        raise FileOperationError(f"Source is not a file: {source}")

    if path_exists(destination):
        if destination.is_dir() and not destination.is_symlink():
            raise FileOperationError(f"Cannot overwrite directory: {destination}")
        logger.info("Overwriting %s with %s", destination, source)
        destination.unlink()

    transfer(source, destination)


def _fail_on_conflict(request: OperationRequest, transfer: Transfer) -> OperationResult:
    # The transfer primitive refuses existing targets
    transfer(request.source, request.destination)
    return _performed(request, request.destination)


def _skip_on_conflict(request: OperationRequest, transfer: Transfer) -> OperationResult:
    if path_exists(request.destination):
        logger.debug("Skipping %s: %s already exists", request.source, request.destination)
        return OperationResult(
            resolved_destination=request.destination, policy=request.policy, skipped=True
        )

    transfer(request.source, request.destination)
    return _performed(request, request.destination)


def _overwrite(request: OperationRequest, transfer: Transfer) -> OperationResult:
    source, destination = request.source, request.destination

    if (
        destination.exists()
        and source.is_file()
        and source.samefile(destination)
    ):
        logger.debug("Source and destination are the same file: %s", destination)
        return OperationResult(
            resolved_destination=destination, policy=request.policy, skipped=True
        )

    _replace(source, destination, transfer)
    return _performed(request, destination)


def _rename_with_number(request: OperationRequest, transfer: Transfer) -> OperationResult:
    destination = request.destination

    if path_exists(destination):
        destination = get_next_available_file_name(destination)
        logger.info("Destination %s exists, using %s", request.destination, destination)

    transfer(request.source, destination)
    return _performed(request, destination)


def _overwrite_if_source_larger(
    request: OperationRequest, transfer: Transfer
) -> OperationResult:
    source, destination = request.source, request.destination

    if not is_source_bigger(source, destination):
        raise PreconditionFailedError(source, destination, "is not smaller")

    _replace(source, destination, transfer)
    return _performed(request, destination)


def _overwrite_if_source_newer(
    request: OperationRequest, transfer: Transfer
) -> OperationResult:
    source, destination = request.source, request.destination

    if not is_source_modified_more_recently(source, destination):
        raise PreconditionFailedError(source, destination, "is not older")

    _replace(source, destination, transfer)
    return _performed(request, destination)


_HANDLERS: dict[ConflictPolicy, Callable[[OperationRequest, Transfer], OperationResult]] = {
    ConflictPolicy.FAIL_ON_CONFLICT: _fail_on_conflict,
    ConflictPolicy.SKIP_ON_CONFLICT: _skip_on_conflict,
    ConflictPolicy.OVERWRITE: _overwrite,
    ConflictPolicy.RENAME_WITH_NUMBER: _rename_with_number,
    ConflictPolicy.OVERWRITE_IF_SOURCE_LARGER: _overwrite_if_source_larger,
    ConflictPolicy.OVERWRITE_IF_SOURCE_NEWER: _overwrite_if_source_newer,
}


def execute(request: OperationRequest, transfer: Transfer) -> OperationResult:
    """
    Apply the request's conflict policy using the given transfer primitive.

    The same policies serve moves and copies; only the transfer differs.
    Destination existence is checked when the policy runs, not cached, so a
    concurrent change between the check and the transfer is not detected.

    Args:
        request: Source, destination and policy
        transfer: move_transfer or copy_transfer (or a compatible callable)

    Returns:
        OperationResult with the path actually written to

    Raises:
        InvalidArgumentError: If source or destination is None or empty
        UnsupportedPolicyError: If the policy has no handler
        PathNotFoundError: If the source is needed and doesn't exist
        FileConflictError: If destination exists under FAIL_ON_CONFLICT
        PreconditionFailedError: If a conditional overwrite is refused
    """
    normalized = OperationRequest(
        source=require_path(request.source, "source"),
        destination=require_path(request.destination, "destination"),
        policy=ConflictPolicy.coerce(request.policy),
    )

    handler = _HANDLERS.get(normalized.policy)
    if handler is None:
        raise UnsupportedPolicyError(normalized.policy)

    logger.debug(
        "%s %s -> %s (policy=%s)",
        getattr(transfer, "__name__", "transfer"),
        normalized.source,
        normalized.destination,
        normalized.policy.value,
    )
    return handler(normalized, transfer)


def _run(
    source: PathLike,
    destination: PathLike,
    policy: ConflictPolicy | str,
    create_dirs: bool,
    transfer: Transfer,
) -> OperationResult:
    source = require_path(source, "source")
    destination = require_path(destination, "destination")

    if create_dirs and not destination.parent.is_dir():
        # A missing source must not leave new directories behind
        if not source.exists():
            raise PathNotFoundError(source, f"Source file not found: {source}")
        destination.parent.mkdir(parents=True, exist_ok=True)

    request = OperationRequest(source=source, destination=destination, policy=policy)
    return execute(request, transfer)


def move_file(
    source: PathLike,
    destination: PathLike,
    policy: ConflictPolicy | str = DEFAULT_POLICY,
    create_dirs: bool = False,
) -> OperationResult:
    """
    Move a file from source to destination.

    Args:
        source: Source file path (must exist)
        destination: Destination file path
        policy: Strategy for handling conflicts when destination exists
        create_dirs: Whether to create destination directories if they don't exist

    Returns:
        OperationResult with the final path of the moved file
    """
    return _run(source, destination, policy, create_dirs, move_transfer)


def copy_file(
    source: PathLike,
    destination: PathLike,
    policy: ConflictPolicy | str = DEFAULT_POLICY,
    create_dirs: bool = False,
) -> OperationResult:
    """
    Copy a file from source to destination.

    Args:
        source: Source file path (must exist)
        destination: Destination file path
        policy: Strategy for handling conflicts when destination exists
        create_dirs: Whether to create destination directories if they don't exist

    Returns:
        OperationResult with the final path of the copy
    """
    return _run(source, destination, policy, create_dirs, copy_transfer)
