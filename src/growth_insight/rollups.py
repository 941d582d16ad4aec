"""Rollups derived from raw activity: daily totals, language proficiency, history windows."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Sequence

from .analytics import as_utc
from .models import Commit, DailyActivity, LanguageProficiency, Repository


def daily_activity(
    commits: Sequence[Commit], repositories: Sequence[Repository] = ()
) -> list[DailyActivity]:
    """Per-UTC-day activity totals, oldest day first.

    Besides commit, addition, deletion and file totals, each day counts the
    distinct repositories committed to and the distinct languages of those
    repositories. Commits to repositories missing from ``repositories``, or
    without a language, still count as a repository but add no language.
    """
    repo_language = {repo.id: repo.language for repo in repositories if repo.language}
    totals: dict[date, list[int]] = defaultdict(lambda: [0, 0, 0, 0])
    repos_by_day: dict[date, set[int]] = defaultdict(set)
    languages_by_day: dict[date, set[str]] = defaultdict(set)

    for commit in commits:
        day = as_utc(commit.committed_at).date()
        row = totals[day]
        row[0] += 1
        row[1] += commit.additions
        row[2] += commit.deletions
        row[3] += commit.files_changed
        repos_by_day[day].add(commit.repository_id)
        language = repo_language.get(commit.repository_id)
        if language:
            languages_by_day[day].add(language)

    return [
        DailyActivity(
            day=day,
            commits=row[0],
            repositories=len(repos_by_day[day]),
            languages=len(languages_by_day[day]),
            additions=row[1],
            deletions=row[2],
            files_changed=row[3],
        )
        for day, row in sorted(totals.items())
    ]


def derive_language_proficiency(
    repositories: Sequence[Repository],
    commits: Sequence[Commit],
    now: datetime,
) -> list[LanguageProficiency]:
    """Build one proficiency row per repository language.

    A language's commits are the commits of the repositories written in it;
    first/last seen are the earliest and latest of those commits, or ``now``
    for a language whose repositories have no commits. Repositories without
    a language are skipped. Rows come back by commit count, highest first.
    """
    repo_language: dict[int, str] = {}
    repo_counts: dict[str, int] = defaultdict(int)
    for repo in repositories:
        if repo.language:
            repo_language[repo.id] = repo.language
            repo_counts[repo.language] += 1

    commit_times: dict[str, list[datetime]] = defaultdict(list)
    for commit in commits:
        language = repo_language.get(commit.repository_id)
        if language is not None:
            commit_times[language].append(as_utc(commit.committed_at))

    fallback = as_utc(now)
    rows = []
    for language, repository_count in repo_counts.items():
        times = commit_times.get(language, [])
        rows.append(
            LanguageProficiency(
                language=language,
                commit_count=len(times),
                repository_count=repository_count,
                first_seen_at=min(times) if times else fallback,
                last_seen_at=max(times) if times else fallback,
            )
        )

    return sorted(rows, key=lambda row: row.commit_count, reverse=True)


def filter_history(commits: Sequence[Commit], now: datetime, days: int) -> list[Commit]:
    """Commits within the trailing ``[now - days, now]`` window, order preserved."""
    end = as_utc(now)
    start = end - timedelta(days=days)
    return [c for c in commits if start <= as_utc(c.committed_at) <= end]
