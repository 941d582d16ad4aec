"""Shared CLI helpers."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console

from ..config import EngineConfig, load_config
from ..exceptions import GrowthInsightError
from ..formatters import get_formatter
from ..loader import load_activity, parse_timestamp
from ..logging_config import get_logger, setup_logging
from ..models import ActivityData
from ..serializers import ReportSerializer

console = Console()

logger = get_logger(__name__)

ReportBuilder = Callable[[ReportSerializer, ActivityData, datetime], dict[str, Any]]


def resolve_now(value: Optional[str]) -> datetime:
    """The reference instant: ``--now`` if given, else the current UTC time."""
    if value is None:
        return datetime.now(timezone.utc)
    moment = parse_timestamp(value)
    if moment is None:
        raise GrowthInsightError(f"--now is not an ISO-8601 timestamp: {value}")
    return moment


def resolve_config(
    ctx: typer.Context, config: Optional[Path] = None, **overrides
) -> EngineConfig:
    """Build config from CLI options plus the global verbosity flags."""
    obj = ctx.obj or {}
    return load_config(
        config_file=config,
        verbose=obj.get("verbose", False),
        quiet=obj.get("quiet", False),
        **overrides,
    )


def run_report(
    ctx: typer.Context,
    data_file: Path,
    now: Optional[str],
    config: Optional[Path],
    json_output: bool,
    build: ReportBuilder,
    **overrides,
) -> None:
    """Load activity, build one report section and render it; errors exit 1."""
    try:
        settings = resolve_config(ctx, config, **overrides)
        # Config files and GROWTH_VERBOSITY can change the level set by the flags
        setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
            log_file=(ctx.obj or {}).get("log_file"),
        )
        moment = resolve_now(now)
        data = load_activity(data_file, moment, settings.history_days)
        report = build(ReportSerializer(settings), data, moment)
    except GrowthInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    get_formatter("json" if json_output else "rich").render(report)


def data_argument() -> Any:
    return typer.Argument(
        ...,
        help="Activity JSON file (commits, repositories, languages)",
        exists=True,
        dir_okay=False,
        readable=True,
    )


def now_option() -> Any:
    return typer.Option(
        None,
        "--now",
        help="Reference instant (ISO-8601); defaults to the current UTC time",
    )


def config_option() -> Any:
    return typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a growth-insight.toml config file",
        dir_okay=False,
    )


def json_option() -> Any:
    return typer.Option(False, "--json", help="Output in machine-readable JSON format")
