"""The dstat command."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from .. import __author__, __date__, __version__
from ..core import run_dstat
from ..exceptions import DStatError
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, resolve_config


def _print_version(value: bool) -> None:
    if value:
        console.print(f"dstat {__version__}", highlight=False)
        raise typer.Exit(0)


def _print_full_version(value: bool) -> None:
    if value:
        console.print(f"dstat {__version__}", highlight=False)
        console.print(__author__, highlight=False)
        console.print(__date__, highlight=False)
        raise typer.Exit(0)


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None,
        metavar="[DIRECTORY]...",
        help="Directories to examine (default: current directory)",
        show_default=False,
    ),
    continuous: bool = typer.Option(
        False,
        "-C",
        "--continuous",
        help="Prints updates as they are retrieved.",
    ),
    linear: bool = typer.Option(
        False,
        "-L",
        "--linear",
        help="Print linear output rather than block.",
    ),
    csv: bool = typer.Option(
        False,
        "-c",
        "--csv",
        help="Output to CSV format.",
    ),
    quiet: bool = typer.Option(
        False,
        "-q",
        "--quiet",
        help="Do not print list of directories or header information.",
    ),
    outfile: Optional[str] = typer.Option(
        None,
        "-o",
        "--outfile",
        metavar="OUTFILE",
        help="Print directory list and accumulated stats to OUTFILE.",
    ),
    logfile: Optional[str] = typer.Option(
        None,
        "-l",
        "--logfile",
        metavar="LOGFILE",
        help="Do not halt on non-fatal errors but log them to LOGFILE.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        hidden=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Print diagnostic messages to stderr.",
    ),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
    full_version: bool = typer.Option(
        False,
        "-V",
        "--Version",
        help="Show version, author and release date and exit.",
        callback=_print_full_version,
        is_eager=True,
    ),
):
    """
    Quickly gathers and reports the numbers of various file types under a
    directory or filesystem.

    [bold cyan]Examples:[/bold cyan]

      dstat

      dstat -L /tmp /var/tmp

      dstat -c -q -o stats.csv -l errors.log /srv/*
    """
    try:
        settings = resolve_config(
            config=config,
            continuous=continuous,
            linear=linear,
            csv=csv,
            quiet=quiet,
            outfile=outfile,
            logfile=logfile,
            debug=debug,
        )
    except DStatError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(e.errno)

    logger = setup_logging(debug=settings.debug)

    try:
        code = run_dstat(paths or [], settings, console=err_console)
    except KeyboardInterrupt:
        logger.info("interrupted by user")
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    raise typer.Exit(code)
