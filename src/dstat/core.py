"""Run orchestration: register directories, scan them, route the output.

The tally and the configuration are passed explicitly; nothing here keeps
process-wide state, so several runs can share an interpreter.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from rich.console import Console
from rich.markup import escape

from .config import OutputConfig
from .errors_log import ErrorLog
from .exceptions import DStatError, ScanError, UsageError, ValidationError
from .logging_config import get_logger
from .registry import DirectoryPath, PathRegistry
from .scanner import scan_directory
from .sinks import SinkRouter
from .tally import TypeTally

logger = get_logger(__name__)

MIN_CONTINUOUS_DIRECTORIES = 2


class DirStat:
    """One invocation: a configuration applied to a list of raw paths."""

    def __init__(self, config: OutputConfig, stdout: Optional[TextIO] = None):
        self.config = config
        self.stdout = stdout

    def register(self, raw_paths: Sequence[Union[str, Path]], error_log: ErrorLog) -> PathRegistry:
        """Validate every raw path; with no paths at all, use the cwd."""
        registry = PathRegistry()
        for raw in raw_paths:
            try:
                registry.add(raw)
            except ValidationError as e:
                error_log.report(e)

        if not raw_paths:
            registry.ensure_default()

        registry.check_consistency()
        return registry

    def scan(self, path: DirectoryPath, tally: TypeTally, error_log: ErrorLog) -> None:
        try:
            scan_directory(path, tally)
        except ScanError as e:
            error_log.report(e)

    def run(self, raw_paths: Sequence[Union[str, Path]]) -> TypeTally:
        """Scan and print.

        Returns:
            The cumulative tally

        Raises:
            DStatError: On any fatal condition; open files are closed first
        """
        tally = TypeTally()
        with SinkRouter(self.config, self.stdout) as router:
            error_log = router.error_log
            registry = self.register(raw_paths, error_log)

            if self.config.continuous and registry.count < MIN_CONTINUOUS_DIRECTORIES:
                raise UsageError("continuous update requires multiple directories")

            registry.freeze()
            paths = registry.paths

            if self.config.continuous:
                router.continuous(paths, tally, lambda p, t: self.scan(p, t, error_log))
            else:
                for path in paths:
                    self.scan(path, tally, error_log)
                router.display(paths, tally)

            if error_log.reported:
                logger.info(f"{error_log.reported} non-fatal error(s) logged to {error_log.logfile}")
        return tally


def run_dstat(
    raw_paths: Sequence[Union[str, Path]],
    config: OutputConfig,
    stdout: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> int:
    """Run DStat and map the outcome to an exit code.

    Returns:
        0 on success, otherwise the errno carried by the fatal error
    """
    console = console or Console(stderr=True)
    try:
        DirStat(config, stdout).run(raw_paths)
    except DStatError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        console.print(
            f"[red]Error:[/red] {escape(e.log_line())}", highlight=False, soft_wrap=True
        )
        return e.errno
    return 0
