"""Directory validation and scanning exceptions."""

import errno as errno_codes
from typing import Optional

from .base import DStatError


class ValidationError(DStatError):
    """Raised when a candidate path does not exist or is not a directory."""

    default_errno = errno_codes.ENOENT

    def __init__(self, raw_path: str, errno: Optional[int] = None):
        super().__init__(raw_path, errno=errno)
        self.raw_path = raw_path


class ScanError(DStatError):
    """Raised when an accepted directory cannot be opened for listing."""

    default_errno = errno_codes.EACCES

    def __init__(self, path: str, cause: OSError):
        super().__init__(str(path), errno=cause.errno)
        self.path = path
        self.cause = cause
