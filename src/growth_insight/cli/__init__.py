"""CLI entry point - registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..logging_config import setup_logging
from ._common import console

app = typer.Typer(
    name="growth-insight",
    help="Growth Insight - developer growth metrics from source-control activity",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold cyan]Growth Insight[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Also append log lines to this file", dir_okay=False
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Compute consistency, velocity, depth and language-growth metrics."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["log_file"] = log_file
    setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


# Import subcommands to register them
from .metrics import metrics as _metrics  # noqa: F401, E402
from .patterns import patterns as _patterns  # noqa: F401, E402
from .languages import languages as _languages  # noqa: F401, E402
from .activity import activity as _activity  # noqa: F401, E402
from .report import report as _report  # noqa: F401, E402
from .context import context as _context  # noqa: F401, E402
