"""Collision-avoiding file names.

Names follow the convention ``name.ext``, ``name (2).ext``, ``name (3).ext``
and so on. The numeric suffix is only recognised when written exactly as a
space followed by a parenthesised number at the end of the stem.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from fileops.paths import PathLike, path_exists, require_path

logger = logging.getLogger(__name__)

NUMBER_SUFFIX_PATTERN = re.compile(r" \((\d+)\)$")

FIRST_SUFFIX_NUMBER = 2


@dataclass(frozen=True)
class NameCandidate:
    """A file name split into stem, optional number suffix and extension.

    Attributes:
        stem: File name without extension and without the number suffix.
        number: The number from a trailing " (N)" suffix, if present.
        extension: The extension including its dot, or an empty string.
    """

    stem: str
    number: int | None
    extension: str

    @classmethod
    def parse(cls, file_name: str) -> "NameCandidate":
        """Split a file name into its candidate parts.

        Examples:
            "Test.txt" -> stem "Test", number None
            "Test (2).txt" -> stem "Test", number 2
            "Test(1).txt" -> stem "Test(1)", number None
        """
        path = Path(file_name)
        stem = path.stem
        extension = path.suffix

        match = NUMBER_SUFFIX_PATTERN.search(stem)
        if match is None:
            return cls(stem=stem, number=None, extension=extension)

        return cls(
            stem=stem[: match.start()],
            number=int(match.group(1)),
            extension=extension,
        )

    def next(self) -> "NameCandidate":
        """Return the candidate following this one in the sequence."""
        if self.number is None:
            return NameCandidate(self.stem, FIRST_SUFFIX_NUMBER, self.extension)
        return NameCandidate(self.stem, self.number + 1, self.extension)

    @property
    def file_name(self) -> str:
        """Render the candidate back into a file name."""
        if self.number is None:
            return f"{self.stem}{self.extension}"
        return f"{self.stem} ({self.number}){self.extension}"


def get_next_available_file_name(path: PathLike | None) -> Path:
    """
    Find the first name in the sequence of path that does not exist yet.

    Args:
        path: Desired path, which may or may not exist

    Returns:
        path unchanged if nothing exists there, otherwise the first free
        numbered sibling

    Raises:
        InvalidArgumentError: If path is None or empty

    Examples:
        Test.txt (free) -> Test.txt
        Test.txt (taken) -> Test (2).txt
        Test (2).txt (taken) -> Test (3).txt
    """
    path = require_path(path, "path")

    if not path_exists(path):
        return path

    parent = path.parent
    candidate = NameCandidate.parse(path.name)
    new_path = path

    while path_exists(new_path):
        candidate = candidate.next()
        new_path = parent / candidate.file_name

    logger.debug("Next available name for %s is %s", path, new_path)
    return new_path
