"""Cumulative entry-type counters shared across every scanned directory."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterable, List


class EntryType(Enum):
    """Directory entry categories, valued by their ``TypeTally`` field name."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK = "block"
    CHAR = "char"
    FIFO = "fifo"
    SOCKET = "socket"
    WHITEOUT = "whiteout"
    UNKNOWN = "unknown"


# Column order for linear and CSV output
COLUMN_ORDER = (
    EntryType.REGULAR,
    EntryType.DIRECTORY,
    EntryType.SYMLINK,
    EntryType.BLOCK,
    EntryType.CHAR,
    EntryType.FIFO,
    EntryType.SOCKET,
    EntryType.WHITEOUT,
    EntryType.UNKNOWN,
)


@dataclass
class TypeTally:
    """Nine non-negative counters, one per ``EntryType``.

    Counters only ever grow: there is no decrement or reset. Every scanned
    entry bumps exactly one of them, so ``total`` is the number of entries
    seen across all directories so far.
    """

    regular: int = 0
    directory: int = 0
    symlink: int = 0
    block: int = 0
    char: int = 0
    fifo: int = 0
    socket: int = 0
    whiteout: int = 0
    unknown: int = 0

    def increment(self, entry_type: EntryType) -> None:
        setattr(self, entry_type.value, getattr(self, entry_type.value) + 1)

    def count(self, entry_type: EntryType) -> int:
        return getattr(self, entry_type.value)

    def values(self, order: Iterable[EntryType] = COLUMN_ORDER) -> List[int]:
        return [self.count(t) for t in order]

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))
