"""Linear formatter: a bordered, fixed-width table with one data row."""

import io
from typing import Sequence

from ..registry import DirectoryPath
from ..tally import COLUMN_ORDER, EntryType, TypeTally
from .base import BaseFormatter
from .block_formatter import directory_list

SHORT_NAMES = {
    EntryType.REGULAR: "Regular",
    EntryType.DIRECTORY: "Dir",
    EntryType.SYMLINK: "Link",
    EntryType.BLOCK: "Block",
    EntryType.CHAR: "Char",
    EntryType.FIFO: "FIFO",
    EntryType.SOCKET: "Socket",
    EntryType.WHITEOUT: "WhtOut",
    EntryType.UNKNOWN: "Unknown",
}

# Each cell is "%8s |", ten characters wide, matching "+" plus nine dashes
CELL_WIDTH = 8
_SEGMENT = "+" + "-" * (CELL_WIDTH + 1)


def border() -> str:
    return _SEGMENT * len(COLUMN_ORDER) + "+\n"


def header_row() -> str:
    return "|" + "".join(f"{SHORT_NAMES[t]:>{CELL_WIDTH}} |" for t in COLUMN_ORDER) + "\n"


def data_row(tally: TypeTally) -> str:
    """The boxed counts, without a line terminator."""
    return "|" + "".join(f"{v:{CELL_WIDTH}d} |" for v in tally.values(COLUMN_ORDER))


def table_header(paths: Sequence[DirectoryPath]) -> str:
    """Directory list plus the bordered column header."""
    return directory_list(paths) + border() + header_row() + border()


class LinearFormatter(BaseFormatter):
    """Render the tally as a single boxed table row."""

    name = "linear"

    def format(self, paths: Sequence[DirectoryPath], tally: TypeTally, quiet: bool = False) -> str:
        output = io.StringIO()
        if not quiet:
            output.write(table_header(paths))
        output.write(data_row(tally) + "\n")
        if not quiet:
            output.write(border())
        return output.getvalue()
