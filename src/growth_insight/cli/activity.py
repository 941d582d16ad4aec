"""Activity CLI command -- per-day commit rollup."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report


@app.command()
def activity(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """Show commits, additions, deletions and files changed per UTC day."""
    run_report(
        ctx,
        data_file,
        now,
        config,
        json_output,
        lambda serializer, data, moment: {"daily_activity": serializer.serialize_activity(data)},
    )
