"""fileops - move, copy, swap and lock files with explicit conflict policies."""

from fileops.exceptions import (
    AlreadyLockedError,
    FileConflictError,
    FileOperationError,
    InvalidArgumentError,
    PathNotFoundError,
    PreconditionFailedError,
    UnsupportedPolicyError,
)
from fileops.file_operations import (
    ConflictPolicy,
    OperationRequest,
    OperationResult,
    copy_file,
    copy_transfer,
    execute,
    move_file,
    move_transfer,
)
from fileops.file_system import FileSystem
from fileops.locking import FileLockInfo, file_lock, is_locked, lock, unlock
from fileops.naming import NameCandidate, get_next_available_file_name
from fileops.paths import ExistsInfo
from fileops.swap import swap_file_names

__version__ = "0.1.0"

__all__ = [
    "AlreadyLockedError",
    "ConflictPolicy",
    "ExistsInfo",
    "FileConflictError",
    "FileLockInfo",
    "FileOperationError",
    "FileSystem",
    "InvalidArgumentError",
    "NameCandidate",
    "OperationRequest",
    "OperationResult",
    "PathNotFoundError",
    "PreconditionFailedError",
    "UnsupportedPolicyError",
    "copy_file",
    "copy_transfer",
    "execute",
    "file_lock",
    "get_next_available_file_name",
    "is_locked",
    "lock",
    "move_file",
    "move_transfer",
    "swap_file_names",
    "unlock",
]
