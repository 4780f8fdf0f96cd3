"""Base exception for DStat."""

import errno as errno_codes
import os
from typing import Dict, Optional


class DStatError(Exception):
    """Base exception for all DStat errors.

    ``errno`` doubles as the process exit code when the error is fatal.
    """

    default_errno = errno_codes.EPERM

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, str]] = None,
        errno: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.errno = errno or self.default_errno

    @property
    def reason(self) -> str:
        return os.strerror(self.errno)

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message

    def log_line(self) -> str:
        """One-line ``<subject>: <reason>`` form used for stderr and the log file."""
        return f"{self.message}: {self.reason}"
