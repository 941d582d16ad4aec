"""Context CLI command -- pre-formatted fields for a narrative prompt."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import config_option, data_argument, json_option, now_option, run_report
from .. import analytics
from ..narrative import build_narrative_context


@app.command()
def context(
    ctx: typer.Context,
    data_file: Path = data_argument(),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Developer handle"),
    now: Optional[str] = now_option(),
    config: Optional[Path] = config_option(),
    json_output: bool = json_option(),
):
    """Emit the metrics and patterns a prompt template embeds."""

    def build(serializer, data, moment):
        snapshot = analytics.calculate_metrics(
            data.repositories,
            data.commits,
            data.languages,
            now=moment,
            growth_window_days=serializer.config.growth_window_days,
        )
        patterns = analytics.analyze_commit_patterns(data.commits)
        return {
            "context": build_narrative_context(snapshot, patterns, data.languages, username)
        }

    run_report(ctx, data_file, now, config, json_output, build)
