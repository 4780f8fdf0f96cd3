"""Entry classification: tally the immediate entries of a directory by type."""

from __future__ import annotations

import os
import stat

from .exceptions import ScanError
from .logging_config import get_logger
from .registry import DirectoryPath
from .tally import EntryType, TypeTally

logger = get_logger(__name__)

# Ordered mode checks for entries the DirEntry fast paths don't cover
_MODE_CHECKS = (
    (stat.S_ISBLK, EntryType.BLOCK),
    (stat.S_ISCHR, EntryType.CHAR),
    (stat.S_ISFIFO, EntryType.FIFO),
    (stat.S_ISSOCK, EntryType.SOCKET),
    (stat.S_ISWHT, EntryType.WHITEOUT),
)


def classify_mode(mode: int) -> EntryType:
    """Map an ``st_mode`` value to its entry type; unrecognized modes are UNKNOWN."""
    if stat.S_ISREG(mode):
        return EntryType.REGULAR
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    for check, entry_type in _MODE_CHECKS:
        if check(mode):
            return entry_type
    return EntryType.UNKNOWN


def classify_entry(entry: os.DirEntry) -> EntryType:
    """Determine the type of a directory entry without following symlinks.

    The cached d_type answers regular/directory/symlink without a syscall;
    everything else needs an lstat. An entry that vanishes before it can be
    inspected is counted as UNKNOWN.
    """
    try:
        if entry.is_symlink():
            return EntryType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.REGULAR
        return classify_mode(entry.stat(follow_symlinks=False).st_mode)
    except OSError as e:
        logger.debug(f"{entry.path}: cannot determine type ({e.strerror})")
        return EntryType.UNKNOWN


def scan_directory(path: DirectoryPath, tally: TypeTally) -> int:
    """Add every immediate entry of ``path`` to ``tally``.

    Entries are counted in listing order. Calls accumulate: the same tally
    is shared by every directory of a run.

    Returns:
        Number of entries counted for this directory

    Raises:
        ScanError: If the directory cannot be opened or read. Entries
            counted before a read failure stay in ``tally``.
    """
    try:
        listing = os.scandir(path)
    except OSError as e:
        raise ScanError(str(path), e) from e

    scanned = 0
    try:
        with listing:
            for entry in listing:
                # os.scandir never yields these, other listing backends might
                if entry.name in (".", ".."):
                    continue
                tally.increment(classify_entry(entry))
                scanned += 1
    except OSError as e:
        logger.debug(f"{path}: read failed after {scanned} entries")
        raise ScanError(str(path), e) from e

    logger.debug(f"{path}: {scanned} entries, {tally.total} cumulative")
    return scanned
