"""Block formatter: the default descriptive, labelled output."""

import io
from typing import Sequence

from ..registry import DirectoryPath
from ..tally import EntryType, TypeTally
from .base import BaseFormatter
from .plural import PluralRule, directory_heading, pluralize

# (type, label stem, plural rule) in display order
BLOCK_LINES = (
    (EntryType.DIRECTORY, "director", PluralRule.Y_TO_IES),
    (EntryType.FIFO, "FIFO file", PluralRule.ADD_S),
    (EntryType.CHAR, "character special file", PluralRule.ADD_S),
    (EntryType.BLOCK, "block special file", PluralRule.ADD_S),
    (EntryType.REGULAR, "regular file", PluralRule.ADD_S),
    (EntryType.SYMLINK, "symlink", PluralRule.ADD_S),
    (EntryType.SOCKET, "socket", PluralRule.ADD_S),
    (EntryType.WHITEOUT, "union whiteout file", PluralRule.ADD_S),
    (EntryType.UNKNOWN, "unknown file type", PluralRule.ADD_S),
)


def directory_list(paths: Sequence[DirectoryPath]) -> str:
    """``Director{y|ies}:`` followed by one tab-indented path per line."""
    lines = [f"{directory_heading(len(paths))}:\n"]
    lines.extend(f"\t{path}\n" for path in paths)
    return "".join(lines)


class BlockFormatter(BaseFormatter):
    """Render one ``<count>:<label>`` line per entry type."""

    name = "block"

    def format(self, paths: Sequence[DirectoryPath], tally: TypeTally, quiet: bool = False) -> str:
        output = io.StringIO()
        if not quiet:
            output.write(directory_list(paths))
            output.write("\nTotals:\n")
        for entry_type, stem, rule in BLOCK_LINES:
            count = tally.count(entry_type)
            output.write(f"{count:8d}:{stem}{pluralize(count, rule)}\n")
        return output.getvalue()
