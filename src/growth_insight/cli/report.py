"""Report CLI command -- every section at once."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report


@app.command()
def report(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """
    Show metrics, patterns, languages and daily activity together.

    [bold cyan]Examples:[/bold cyan]

      growth-insight report activity.json

      growth-insight report activity.json --json > report.json
    """
    run_report(
        ctx,
        data_file,
        now,
        config,
        json_output,
        lambda serializer, data, moment: serializer.report(data, moment),
    )
