"""Rich terminal formatter for Growth Insight."""

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .base import BaseFormatter

console = Console()


def _score_label(score: float) -> str:
    if score >= 75:
        return "[green]strong[/green]"
    elif score >= 40:
        return "[yellow]moderate[/yellow]"
    else:
        return "[red]low[/red]"


def _growth_label(tier: str) -> str:
    colors = {"High": "green", "Medium": "yellow", "Low": "dim"}
    color = colors.get(tier, "white")
    return f"[{color}]{tier}[/{color}]"


class RichFormatter(BaseFormatter):
    """Rich terminal output: a metrics panel followed by one table per section."""

    def __init__(self, target: Optional[Console] = None):
        self.console = target or console

    def render(self, report: dict[str, Any]) -> None:
        if "metrics" in report:
            self._print_metrics(report["metrics"])
        if "patterns" in report:
            self._print_patterns(report["patterns"])
        if "languages" in report:
            self._print_languages(report["languages"])
        if "daily_activity" in report:
            self._print_activity(report["daily_activity"])
        if "context" in report:
            self._print_context(report["context"])

    def format(self, report: dict[str, Any]) -> str:
        # Rich output goes directly to console; return empty string
        self.render(report)
        return ""

    def _print_metrics(self, metrics: dict[str, Any]) -> None:
        lines = [
            f"Commits: [bold]{metrics['total_commits']}[/bold]   "
            f"Repositories: [bold]{metrics['total_repositories']}[/bold]   "
            f"Languages: [bold]{metrics['unique_languages']}[/bold]",
        ]
        if metrics.get("last_calculated_at"):
            lines.append(f"[dim]Calculated at {metrics['last_calculated_at']}[/dim]")
        self.console.print(
            Panel("\n".join(lines), title="[bold cyan]Developer Growth[/bold cyan]", expand=False)
        )

        table = Table(show_header=True, header_style="bold")
        table.add_column("Metric", min_width=22)
        table.add_column("Value", justify="right")
        table.add_column("Assessment")

        for key, label in (
            ("consistency_score", "Consistency"),
            ("project_depth", "Project depth"),
            ("skill_growth_trend", "Recent activity share"),
        ):
            value = metrics[key]
            table.add_row(label, f"{value}/100", _score_label(value))
        table.add_row("Learning velocity", f"{metrics['learning_velocity']:.2f}/day", "")
        table.add_row("Depth / breadth", f"{metrics['depth_breadth_ratio']:.2f}", "")
        self.console.print(table)

    def _print_patterns(self, patterns: dict[str, Any]) -> None:
        table = Table(title="Commit Patterns", show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        table.add_row("Average commits per day", f"{patterns['average_commits_per_day']:.2f}")
        table.add_row("Peak day", patterns["peak_day"])
        if "productivity_pattern" in patterns:
            table.add_row("Rhythm", patterns["productivity_pattern"])
        self.console.print(table)

    def _print_languages(self, languages: dict[str, Any]) -> None:
        table = Table(title="Top Languages", show_header=True, header_style="bold")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Language")
        table.add_column("Commits", justify="right")
        table.add_column("Growth")
        for i, row in enumerate(languages.get("top_languages", []), 1):
            table.add_row(str(i), row["language"], str(row["commit_count"]), _growth_label(row["growth"]))
        self.console.print(table)

        new = languages.get("new_languages", [])
        if new:
            self.console.print(f"[bold]New languages:[/bold] {', '.join(new)}")
        else:
            self.console.print("[dim]No new languages in the window.[/dim]")

    def _print_activity(self, days: list[dict[str, Any]]) -> None:
        if not days:
            self.console.print("[yellow]No commit activity.[/yellow]")
            return
        table = Table(title="Daily Activity", show_header=True, header_style="bold")
        table.add_column("Day")
        table.add_column("Commits", justify="right")
        table.add_column("Repos", justify="right")
        table.add_column("Langs", justify="right")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")
        table.add_column("Files", justify="right")
        for day in days:
            table.add_row(
                day["day"],
                str(day["commits"]),
                str(day["repositories"]),
                str(day["languages"]),
                str(day["additions"]),
                str(day["deletions"]),
                str(day["files_changed"]),
            )
        self.console.print(table)

    def _print_context(self, context: dict[str, str]) -> None:
        table = Table(title="Narrative Context", show_header=False)
        table.add_column("Key", style="bold")
        table.add_column("Value")
        for key, value in context.items():
            table.add_row(key, value)
        self.console.print(table)
