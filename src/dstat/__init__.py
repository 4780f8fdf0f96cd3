"""
DStat - Quickly gather and print directory statistics.

Counts the immediate entries of one or more directories by type (regular
file, directory, symlink, block/character device, socket, FIFO, whiteout,
unknown) and prints the combined totals as a descriptive block, a bordered
table or CSV.
"""

__version__ = "0.4.0"
__author__ = "Walter G Davies"
__date__ = "2024-06-01"

from .config import OutputConfig, load_config
from .core import DirStat, run_dstat
from .registry import PathRegistry, validate
from .scanner import scan_directory
from .tally import EntryType, TypeTally

__all__ = [
    "run_dstat",  # Main entry point
    "DirStat",
    "OutputConfig",
    "load_config",
    "PathRegistry",
    "validate",
    "scan_directory",
    "EntryType",
    "TypeTally",
]
