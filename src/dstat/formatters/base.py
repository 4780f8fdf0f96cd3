"""Base formatter interface for DStat output rendering."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..registry import DirectoryPath
from ..tally import TypeTally


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    ``format`` is a pure function of the directory list, the tally and the
    quiet flag; where its result goes is up to ``dstat.sinks``.
    """

    name = "base"

    @abstractmethod
    def format(self, paths: Sequence[DirectoryPath], tally: TypeTally, quiet: bool = False) -> str:
        """Return formatted string representation of the tally."""
