"""Data models for developer activity and the metrics derived from it."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Commit:
    hash: str  # unique per repository
    repository_id: int
    committed_at: datetime  # naive values are read as UTC
    additions: int = 0
    deletions: int = 0
    files_changed: int = 0
    message: str = ""
    author: str = ""


@dataclass(frozen=True)
class Repository:
    id: int
    name: str
    size: int = 0  # kilobytes
    language: Optional[str] = None
    stars: int = 0
    forks: int = 0


@dataclass(frozen=True)
class LanguageProficiency:
    """Aggregate activity for one language; one row per language per developer."""

    language: str
    first_seen_at: datetime
    last_seen_at: datetime
    commit_count: int = 0
    repository_count: int = 0


@dataclass(frozen=True)
class MetricsSnapshot:
    """Scalar growth metrics for one developer at one reference instant.

    Not persisted here: the caller stores it and stamps ``last_calculated_at``.
    """

    consistency_score: int  # 0-100
    skill_growth_trend: int  # 0-100, share of commits in the growth window
    learning_velocity: float  # commits per day
    project_depth: int  # 0-100
    depth_breadth_ratio: float
    total_commits: int
    total_repositories: int
    unique_languages: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CommitPatterns:
    average_commits_per_day: float  # total / 7, a fixed weekly normalization
    peak_day: str
    bursty_pattern: bool
    consistent_pattern: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class GrowthLanguage:
    language: str
    commit_count: int
    growth: str  # "High" | "Medium" | "Low"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DailyActivity:
    day: date  # UTC calendar day
    commits: int
    repositories: int  # distinct repositories committed to
    languages: int  # distinct languages of those repositories
    additions: int
    deletions: int
    files_changed: int

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["day"] = self.day.isoformat()
        return data


@dataclass
class ActivityData:
    """The three record collections for a single developer."""

    commits: list[Commit]
    repositories: list[Repository]
    languages: list[LanguageProficiency]
