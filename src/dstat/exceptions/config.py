"""Configuration, usage and resource exceptions."""

import errno as errno_codes
from typing import Any, Optional

from .base import DStatError


class UsageError(DStatError):
    """Raised for invalid option combinations, before any scanning."""

    default_errno = errno_codes.EINVAL


class InvalidConfigError(UsageError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value


class ResourceError(DStatError):
    """Raised when an output or log file cannot be opened or written."""

    default_errno = errno_codes.EIO

    def __init__(self, target: str, cause: Optional[OSError] = None):
        super().__init__(str(target), errno=cause.errno if cause is not None else None)
        self.target = target
        self.cause = cause


class ConsistencyError(DStatError):
    """Raised when the validated directory count disagrees with the registry."""

    default_errno = errno_codes.EIO
