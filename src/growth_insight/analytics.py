"""Analytics engine: developer growth metrics over commit, repository and language records.

Every function is pure. Nothing here reads the system clock; functions that
depend on "now" take it as a keyword argument. Calendar days and weekdays
are taken in UTC, and naive datetimes are treated as already being UTC.

Rounding is half away from zero on the decimal value (``1.005`` -> ``1.01``)
for both integer scores and two-decimal ratios. Population statistics
(ddof=0) are used throughout, over *active* buckets only: a day or weekday
without commits contributes nothing rather than a zero.
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import numpy as np

from .logging_config import get_logger
from .models import (
    Commit,
    CommitPatterns,
    GrowthLanguage,
    LanguageProficiency,
    MetricsSnapshot,
    Repository,
)

logger = get_logger(__name__)

SECONDS_PER_DAY = 86400

# Calibration constants. Changing any of these changes every stored score.
SIZE_SATURATION_KB = 1000  # average repo size that maxes the size score
DENSITY_POINTS_PER_COMMIT = 5  # 20 commits per repo maxes the density score
SIZE_WEIGHT = 0.4
DENSITY_WEIGHT = 0.6
CV_PENALTY = 50  # consistency points lost per unit of coefficient of variation
BURSTY_CV = 0.5
CONSISTENT_CV = 0.3
HIGH_GROWTH_COMMITS = 100
MEDIUM_GROWTH_COMMITS = 50

DEFAULT_WINDOW_DAYS = 90
DEFAULT_TOP_LANGUAGES = 3

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
DEFAULT_PEAK_DAY = "Monday"


def round_half_up(value: float, places: int = 0) -> float:
    """Round half away from zero to ``places`` decimals.

    Works on the shortest decimal repr of the float, so ``2.675`` rounds to
    ``2.68`` rather than the ``2.67`` binary rounding would give.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def as_utc(moment: datetime) -> datetime:
    """Return an aware UTC datetime; naive input is assumed to be UTC already."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _weekday_index(moment: datetime) -> int:
    """Day of week with 0=Sunday .. 6=Saturday."""
    return (as_utc(moment).weekday() + 1) % 7


def _mean_and_std(counts: Sequence[int]) -> tuple[float, float]:
    values = np.asarray(counts, dtype=float)
    return float(values.mean()), float(values.std())


def calculate_consistency_score(commits: Sequence[Commit]) -> int:
    """Score 0-100 for how evenly commits spread across active days.

    ``100 - cv * 50`` clamped to [0, 100], where cv is the coefficient of
    variation of per-day commit counts. A single active day scores 100.
    """
    if not commits:
        return 0

    per_day = Counter(as_utc(c.committed_at).date() for c in commits)
    mean, std = _mean_and_std(list(per_day.values()))

    cv = std / mean if mean else 0.0
    score = max(0.0, min(100.0, 100 - cv * CV_PENALTY))
    return int(round_half_up(score))


def calculate_learning_velocity(commits: Sequence[Commit]) -> float:
    """Average commits per day across the observed span (fractional days).

    A zero-length span returns the raw commit count.
    """
    if not commits:
        return 0.0

    moments = [as_utc(c.committed_at) for c in commits]
    days = (max(moments) - min(moments)).total_seconds() / SECONDS_PER_DAY
    if days == 0:
        return float(len(commits))

    return round_half_up(len(commits) / days, 2)


def calculate_project_depth(repositories: Sequence[Repository], commits: Sequence[Commit]) -> int:
    """Score 0-100 blending average repository size (40%) and commits per repo (60%)."""
    if not repositories:
        return 0

    avg_size = sum(r.size for r in repositories) / len(repositories)
    size_score = min(100.0, avg_size / SIZE_SATURATION_KB * 100)

    commit_density = len(commits) / len(repositories)
    density_score = min(100.0, commit_density * DENSITY_POINTS_PER_COMMIT)

    return int(round_half_up(size_score * SIZE_WEIGHT + density_score * DENSITY_WEIGHT))


def calculate_depth_breadth_ratio(
    repositories: Sequence[Repository],
    commits: Sequence[Commit],
    languages: Sequence[LanguageProficiency],
) -> float:
    """Commits per repository divided by the number of languages."""
    if not repositories or not languages:
        return 0.0

    depth = len(commits) / len(repositories)
    breadth = len(languages)
    return round_half_up(depth / breadth, 2)


def calculate_skill_growth_trend(
    languages: Sequence[LanguageProficiency],
    commits: Sequence[Commit],
    window_days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime,
) -> int:
    """Percentage (0-100) of all commits made within the trailing window."""
    if not languages:
        return 0

    cutoff = as_utc(now) - timedelta(days=window_days)
    recent = sum(1 for c in commits if as_utc(c.committed_at) >= cutoff)
    if recent == 0:
        return 0

    return int(min(100.0, round_half_up(recent / len(commits) * 100)))


def analyze_commit_patterns(commits: Sequence[Commit]) -> CommitPatterns:
    """Classify the weekly rhythm of commits.

    The peak day is the weekday with the most commits; ties go to the lowest
    weekday index (Sunday first). Bursty and consistent flags compare the
    standard deviation of the active weekday buckets against their mean.
    Both can be false ("Mixed"); both cannot be true.
    """
    if not commits:
        return CommitPatterns(
            average_commits_per_day=0.0,
            peak_day=DEFAULT_PEAK_DAY,
            bursty_pattern=False,
            consistent_pattern=False,
        )

    by_weekday = Counter(_weekday_index(c.committed_at) for c in commits)

    peak_index = 0
    peak_count = 0
    for index in sorted(by_weekday):
        if by_weekday[index] > peak_count:
            peak_count = by_weekday[index]
            peak_index = index

    mean, std = _mean_and_std([by_weekday[i] for i in sorted(by_weekday)])

    return CommitPatterns(
        average_commits_per_day=round_half_up(len(commits) / 7, 2),
        peak_day=WEEKDAY_NAMES[peak_index],
        bursty_pattern=std > mean * BURSTY_CV,
        consistent_pattern=std < mean * CONSISTENT_CV,
    )


def identify_new_languages(
    languages: Sequence[LanguageProficiency],
    window_days: int = DEFAULT_WINDOW_DAYS,
    *,
    now: datetime,
) -> list[str]:
    """Names of languages first seen within ``[now - window_days, now]``, in input order."""
    end = as_utc(now)
    cutoff = end - timedelta(days=window_days)
    return [
        lang.language
        for lang in languages
        if cutoff <= as_utc(lang.first_seen_at) <= end
    ]


def _growth_tier(commit_count: int) -> str:
    if commit_count > HIGH_GROWTH_COMMITS:
        return "High"
    if commit_count > MEDIUM_GROWTH_COMMITS:
        return "Medium"
    return "Low"


def identify_growth_languages(
    languages: Sequence[LanguageProficiency], top_n: int = DEFAULT_TOP_LANGUAGES
) -> list[GrowthLanguage]:
    """Top ``top_n`` languages by commit count, each tagged with a growth tier.

    The sort is stable (ties keep input order) and works on a copy.
    """
    ranked = sorted(languages, key=lambda lang: lang.commit_count, reverse=True)
    return [
        GrowthLanguage(
            language=lang.language,
            commit_count=lang.commit_count,
            growth=_growth_tier(lang.commit_count),
        )
        for lang in ranked[: max(top_n, 0)]
    ]


def calculate_metrics(
    repositories: Sequence[Repository],
    commits: Sequence[Commit],
    languages: Sequence[LanguageProficiency],
    *,
    now: datetime,
    growth_window_days: int = DEFAULT_WINDOW_DAYS,
) -> MetricsSnapshot:
    """Compute the full metrics snapshot for one developer."""
    snapshot = MetricsSnapshot(
        consistency_score=calculate_consistency_score(commits),
        skill_growth_trend=calculate_skill_growth_trend(
            languages, commits, growth_window_days, now=now
        ),
        learning_velocity=calculate_learning_velocity(commits),
        project_depth=calculate_project_depth(repositories, commits),
        depth_breadth_ratio=calculate_depth_breadth_ratio(repositories, commits, languages),
        total_commits=len(commits),
        total_repositories=len(repositories),
        unique_languages=len(languages),
    )
    logger.debug(
        "Metrics for %d commits, %d repositories, %d languages: %s",
        len(commits),
        len(repositories),
        len(languages),
        snapshot,
    )
    return snapshot
