"""Output formatters for DStat."""

from .base import BaseFormatter
from .block_formatter import BlockFormatter
from .csv_formatter import CsvFormatter
from .linear_formatter import LinearFormatter
from .plural import PluralRule, pluralize


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "block", "linear", "csv"

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "block": BlockFormatter,
        "linear": LinearFormatter,
        "csv": CsvFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "BlockFormatter",
    "LinearFormatter",
    "CsvFormatter",
    "PluralRule",
    "pluralize",
    "get_formatter",
]
