"""Patterns CLI command -- weekly commit rhythm."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report


@app.command()
def patterns(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """Show peak weekday, weekly average and bursty/consistent rhythm."""
    run_report(
        ctx,
        data_file,
        now,
        config,
        json_output,
        lambda serializer, data, moment: {"patterns": serializer.serialize_patterns(data)},
    )
