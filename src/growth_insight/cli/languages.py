"""Languages CLI command -- growth ranking and newly adopted languages."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report


@app.command()
def languages(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    top: Optional[int] = typer.Option(
        None,
        "--top",
        "-t",
        help="Number of languages to rank",
        min=1,
        max=100,
    ),
    window_days: Optional[int] = typer.Option(
        None,
        "--window-days",
        "-w",
        help="Days back a language counts as new",
        min=0,
    ),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """
    Rank languages by commit volume and list recently adopted ones.

    [bold cyan]Examples:[/bold cyan]

      growth-insight languages activity.json --top 5

      growth-insight languages activity.json --window-days 30 --json
    """
    run_report(
        ctx,
        data_file,
        now,
        config,
        json_output,
        lambda serializer, data, moment: {
            "languages": serializer.serialize_languages(data, moment)
        },
        top_languages=top,
        new_language_window_days=window_days,
    )
