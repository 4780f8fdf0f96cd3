"""Validation and ordered storage of the directories to scan."""

from __future__ import annotations

import errno
import os
import stat
from pathlib import Path
from typing import Iterator, List, Union

from .exceptions import ConsistencyError, ValidationError
from .logging_config import get_logger

logger = get_logger(__name__)

# A validated, absolute directory path
DirectoryPath = Path


def validate(raw_path: Union[str, Path]) -> DirectoryPath:
    """Check that ``raw_path`` exists and is a directory.

    Absolute paths are kept exactly as given; relative ones (including
    ``.``) are canonicalized against the current working directory without
    changing it.

    Raises:
        ValidationError: carrying the offending raw string
    """
    raw = str(raw_path)
    try:
        st = os.stat(raw)
    except OSError as e:
        logger.debug(f"{raw}: stat failed ({e.strerror})")
        raise ValidationError(raw, errno=e.errno or errno.ENOENT) from e
    except ValueError as e:
        # Embedded NUL bytes and the like
        raise ValidationError(raw, errno=errno.EINVAL) from e

    if not stat.S_ISDIR(st.st_mode):
        logger.debug(f"{raw}: not a directory (mode {st.st_mode:o})")
        raise ValidationError(raw, errno=errno.ENOTDIR)

    path = Path(raw)
    if not path.is_absolute():
        path = path.resolve()
    logger.debug(f"accepted {raw} as {path}")
    return path


class PathRegistry:
    """Insertion-ordered collection of accepted directories.

    ``validated`` counts successful validations independently of the list
    so ``check_consistency`` can catch a registry that lost or duplicated
    an entry. The registry is frozen once scanning starts.
    """

    def __init__(self) -> None:
        self._paths: List[DirectoryPath] = []
        self.validated = 0
        self._frozen = False

    def add(self, raw_path: Union[str, Path]) -> DirectoryPath:
        """Validate ``raw_path`` and append it.

        Raises:
            ValidationError: If the path is not an existing directory
        """
        if self._frozen:
            raise RuntimeError("PathRegistry is frozen once scanning begins")
        path = validate(raw_path)
        self.validated += 1
        self._paths.append(path)
        return path

    def ensure_default(self) -> None:
        """Fall back to the current working directory when nothing was accepted."""
        if not self._paths:
            self.add(Path.cwd())

    def check_consistency(self) -> None:
        if self.validated != self.count:
            raise ConsistencyError(
                "directory count mismatch",
                details={"validated": str(self.validated), "registered": str(self.count)},
            )

    def freeze(self) -> None:
        self._frozen = True

    @property
    def count(self) -> int:
        return len(self._paths)

    @property
    def paths(self) -> List[DirectoryPath]:
        return list(self._paths)

    def __iter__(self) -> Iterator[DirectoryPath]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)
