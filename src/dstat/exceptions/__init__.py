"""Exception hierarchy for DStat."""

from .base import DStatError
from .config import (
    ConsistencyError,
    InvalidConfigError,
    ResourceError,
    UsageError,
)
from .scanning import ScanError, ValidationError

__all__ = [
    "DStatError",
    "ValidationError",
    "ScanError",
    "UsageError",
    "InvalidConfigError",
    "ResourceError",
    "ConsistencyError",
]
