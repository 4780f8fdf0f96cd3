"""Routing of rendered output to stdout and the optional output file."""

from __future__ import annotations

import sys
from contextlib import ExitStack
from enum import Enum
from typing import IO, Callable, Optional, Sequence, TextIO

from .config import OutputConfig
from .errors_log import ErrorLog
from .exceptions import DStatError, ResourceError
from .formatters import get_formatter
from .formatters.linear_formatter import border, data_row, table_header
from .logging_config import get_logger
from .registry import DirectoryPath
from .tally import TypeTally

logger = get_logger(__name__)


class OutputChannel(Enum):
    PRINT = "print"  # stdout
    WRITE = "write"  # output file


def select_stdout_format(config: OutputConfig) -> str:
    """Pick the stdout renderer.

    Continuous mode, or linear without CSV, or linear with CSV when an
    output file takes the CSV, gives the table; CSV alone gives CSV;
    everything else gets the block.
    """
    if config.continuous or (config.linear and not config.csv) or (
        config.linear and config.csv and config.output_requested
    ):
        return "linear"
    if config.csv and not config.linear and not config.output_requested:
        return "csv"
    return "block"


def select_file_format(config: OutputConfig) -> Optional[str]:
    """Renderer for the output file, independent of the stdout choice."""
    if not config.output_requested:
        return None
    return "csv" if config.csv else "block"


class SinkRouter:
    """Owns the output file and the error log for one run.

    Use as a context manager: both files are opened on entry, in append
    mode, and closed exactly once on exit whatever the exit path.
    """

    def __init__(self, config: OutputConfig, stdout: Optional[TextIO] = None):
        self.config = config
        self.stdout = stdout if stdout is not None else sys.stdout
        self.outfile: Optional[IO[str]] = None
        self.error_log = ErrorLog()
        self._stack = ExitStack()

    def __enter__(self) -> "SinkRouter":
        try:
            if self.config.log_requested:
                self.error_log = ErrorLog(self.config.logfile)
                self._stack.callback(self.error_log.close)
            if self.config.output_requested:
                try:
                    self.outfile = self._stack.enter_context(
                        open(self.config.outfile, "a", encoding="utf-8")
                    )
                except OSError as e:
                    raise ResourceError(self.config.outfile, e) from e
        except DStatError:
            self._stack.close()
            raise
        return self

    def __exit__(self, *exc_info) -> None:
        self._stack.close()

    def emit(self, text: str, channel: OutputChannel = OutputChannel.PRINT) -> None:
        """Send a rendered buffer to one channel.

        Raises:
            ResourceError: If the output file cannot be written
        """
        if channel is OutputChannel.PRINT:
            self.stdout.write(text)
            self.stdout.flush()
            return

        if self.outfile is None:
            raise ResourceError(str(self.config.outfile))
        try:
            self.outfile.write(text)
            self.outfile.flush()
        except OSError as e:
            raise ResourceError(str(self.config.outfile), e) from e

    def display(self, paths: Sequence[DirectoryPath], tally: TypeTally) -> None:
        """Render the final tally to stdout and, if requested, the output file."""
        stdout_format = select_stdout_format(self.config)
        file_format = select_file_format(self.config)
        logger.debug(f"stdout format: {stdout_format}, file format: {file_format}")

        self.emit(get_formatter(stdout_format).format(paths, tally, self.config.quiet))
        self.write_file(paths, tally)

    def write_file(self, paths: Sequence[DirectoryPath], tally: TypeTally) -> None:
        file_format = select_file_format(self.config)
        if file_format is not None:
            self.emit(
                get_formatter(file_format).format(paths, tally, self.config.quiet),
                OutputChannel.WRITE,
            )

    def continuous(
        self,
        paths: Sequence[DirectoryPath],
        tally: TypeTally,
        scan: Callable[[DirectoryPath, TypeTally], None],
    ) -> None:
        """Scan each directory in turn, printing the running totals after each.

        Rows are appended one per line when linear output was requested,
        otherwise rewritten in place with a carriage return.
        """
        quiet = self.config.quiet
        if not quiet:
            self.emit(table_header(paths))

        for path in paths:
            scan(path, tally)
            if self.config.linear:
                self.emit(data_row(tally) + "\n")
            else:
                self.emit("\r" + data_row(tally))

        if not self.config.linear:
            self.emit("\n")
        if not quiet:
            self.emit(border())

        self.write_file(paths, tally)
