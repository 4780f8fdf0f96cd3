"""CSV formatter for DStat."""

import csv
import io
from typing import Sequence

from ..registry import DirectoryPath
from ..tally import COLUMN_ORDER, EntryType, TypeTally
from .base import BaseFormatter
from .plural import directory_heading

CSV_NAMES = {
    EntryType.REGULAR: "Regular",
    EntryType.DIRECTORY: "Directory",
    EntryType.SYMLINK: "Link",
    EntryType.BLOCK: "Block Special",
    EntryType.CHAR: "Character Special",
    EntryType.FIFO: "FIFO",
    EntryType.SOCKET: "Socket",
    EntryType.WHITEOUT: "White Out",
    EntryType.UNKNOWN: "Unknown",
}


class CsvFormatter(BaseFormatter):
    """Render the directory list, a header row and a row of counts as CSV.

    Paths go through the csv writer, so one containing a comma or quote
    comes out quoted.
    """

    name = "csv"

    def format(self, paths: Sequence[DirectoryPath], tally: TypeTally, quiet: bool = False) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        if not quiet:
            writer.writerow([directory_heading(len(paths))])
            for path in paths:
                writer.writerow([str(path)])
            writer.writerow([CSV_NAMES[t] for t in COLUMN_ORDER])
        writer.writerow(tally.values(COLUMN_ORDER))
        return output.getvalue()
