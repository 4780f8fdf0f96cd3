"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import OutputConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    continuous: bool = False,
    linear: bool = False,
    csv: bool = False,
    quiet: bool = False,
    outfile: Optional[str] = None,
    logfile: Optional[str] = None,
    debug: bool = False,
) -> OutputConfig:
    """Build the output configuration from CLI options.

    Flags left at False are passed as unset so config files and DSTAT_*
    variables can still turn them on.
    """
    return load_config(
        config_file=config,
        continuous=continuous or None,
        linear=linear or None,
        csv=csv or None,
        quiet=quiet or None,
        outfile=outfile,
        logfile=logfile,
        debug=debug or None,
    )
