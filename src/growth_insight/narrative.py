"""Plain-data context for the narrative (prompt-building) collaborator.

Nothing here writes prose. The keys below are a stable contract: a prompt
template embeds them directly, so renaming one is a breaking change.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from .analytics import as_utc
from .models import CommitPatterns, LanguageProficiency, MetricsSnapshot


def productivity_pattern(patterns: CommitPatterns) -> str:
    """Label the weekly rhythm: bursty wins over consistent, neither is "Mixed"."""
    if patterns.bursty_pattern:
        return "Burst-based"
    if patterns.consistent_pattern:
        return "Consistent"
    return "Mixed"


def skill_timeline(languages: Sequence[LanguageProficiency]) -> list[dict[str, Any]]:
    return [
        {
            "language": lang.language,
            "commit_count": lang.commit_count,
            "repository_count": lang.repository_count,
            "first_seen": as_utc(lang.first_seen_at).isoformat(),
            "last_seen": as_utc(lang.last_seen_at).isoformat(),
        }
        for lang in languages
    ]


def build_narrative_context(
    snapshot: MetricsSnapshot,
    patterns: CommitPatterns,
    languages: Sequence[LanguageProficiency],
    username: Optional[str] = None,
) -> dict[str, str]:
    """Flatten metrics and patterns into pre-formatted strings for a prompt template."""
    return {
        "username": username or "",
        "total_commits": str(snapshot.total_commits),
        "total_repositories": str(snapshot.total_repositories),
        "unique_languages": str(snapshot.unique_languages),
        "consistency_score": f"{snapshot.consistency_score}/100",
        "learning_velocity": f"{snapshot.learning_velocity:.2f} commits/day",
        "project_depth": f"{snapshot.project_depth}/100",
        "depth_breadth_ratio": f"{snapshot.depth_breadth_ratio:.2f}",
        "skill_growth_trend": f"{snapshot.skill_growth_trend}%",
        "languages_used": ", ".join(lang.language for lang in languages),
        "average_commits_per_day": f"{patterns.average_commits_per_day:.2f}",
        "peak_day": patterns.peak_day,
        "productivity_pattern": productivity_pattern(patterns),
    }
