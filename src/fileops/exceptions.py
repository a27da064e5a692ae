"""Exceptions raised by fileops operations.

Every error raised on purpose by the library derives from FileOperationError,
so callers can catch the whole family or a single kind.
"""

from pathlib import Path


class FileOperationError(Exception):
    """Base exception for file operation errors."""

    pass


class InvalidArgumentError(FileOperationError):
    """Raised when a required path or argument is missing or empty."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        """Initialize invalid argument error."""
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' was None or empty.")


class PathNotFoundError(FileOperationError):
    """Raised when a file or directory that must exist does not."""

    def __init__(self, path: Path | None, message: str | None = None) -> None:
        """Initialize not found error."""
        self.path = path
        super().__init__(message or f"Path not found: {path}")


class FileConflictError(FileOperationError):
    """Raised when target file already exists."""

    def __init__(self, source: Path, target: Path) -> None:
        """Initialize conflict error."""
        self.source = source
        self.target = target
        super().__init__(f"Target file already exists: {target}")


class AlreadyLockedError(FileOperationError):
    """Raised when a lock marker already exists for a file."""

    def __init__(self, path: Path, lock_path: Path) -> None:
        """Initialize already locked error."""
        self.path = path
        self.lock_path = lock_path
        super().__init__(
            f"Lock file '{lock_path}' cannot be created as it already exists."
        )


class PreconditionFailedError(FileOperationError):
    """Raised when an existing target fails a conditional overwrite check."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        """Initialize precondition error."""
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(
            f"Destination file '{target}' exists and {reason} than source file '{source}'."
        )


class UnsupportedPolicyError(FileOperationError):
    """Raised when a conflict policy cannot be resolved to a handler."""

    def __init__(self, policy: object) -> None:
        """Initialize unsupported policy error."""
        self.policy = policy
        super().__init__(f"Unsupported conflict policy: {policy!r}")
