"""Metrics CLI command -- the aggregate growth snapshot."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report


@app.command()
def metrics(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """
    Show consistency, velocity, depth and growth scores.

    [bold cyan]Examples:[/bold cyan]

      growth-insight metrics activity.json

      growth-insight metrics activity.json --now 2024-06-01T00:00:00Z --json
    """
    run_report(
        ctx,
        data_file,
        now,
        config,
        json_output,
        lambda serializer, data, moment: {"metrics": serializer.serialize_metrics(data, moment)},
    )
