"""CLI entry point."""

import typer

app = typer.Typer(
    name="dstat",
    help="Quickly gathers and reports the numbers of various file types under a directory.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Import the command to register it
from .main import main  # noqa: F401, E402
