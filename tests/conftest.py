"""Shared test fixtures for Growth Insight tests."""

from datetime import datetime, timedelta, timezone

import pytest

from growth_insight.models import Commit, LanguageProficiency, Repository

# Saturday
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference instant: Saturday 2024-06-01 12:00 UTC."""
    return NOW


@pytest.fixture
def days_ago():
    """Instant ``days`` before the reference instant."""

    def _days_ago(days: float) -> datetime:
        return NOW - timedelta(days=days)

    return _days_ago


@pytest.fixture
def make_commit():
    """Factory for commits; ``at`` defaults to the reference instant."""
    counter = {"n": 0}

    def _make(at=NOW, repository_id=1, additions=10, deletions=5, files_changed=2):
        counter["n"] += 1
        return Commit(
            hash=f"{counter['n']:040x}",
            repository_id=repository_id,
            committed_at=at,
            additions=additions,
            deletions=deletions,
            files_changed=files_changed,
        )

    return _make


@pytest.fixture
def make_repo():
    """Factory for repositories."""

    def _make(id=1, size=500, language="TypeScript"):
        return Repository(id=id, name=f"repo-{id}", size=size, language=language)

    return _make


@pytest.fixture
def make_language():
    """Factory for language proficiency rows."""

    def _make(language, commit_count=0, first_seen_at=NOW, last_seen_at=NOW, repository_count=1):
        return LanguageProficiency(
            language=language,
            commit_count=commit_count,
            repository_count=repository_count,
            first_seen_at=first_seen_at,
            last_seen_at=last_seen_at,
        )

    return _make


@pytest.fixture
def ranked_languages(make_language):
    """TypeScript 150, Python 75, JavaScript 30."""
    return [
        make_language("TypeScript", 150),
        make_language("Python", 75),
        make_language("JavaScript", 30),
    ]


@pytest.fixture
def activity_payload():
    """A small activity document as the ingestion layer would supply it."""
    return {
        "commits": [
            {"hash": "a1", "repository_id": 1, "committed_at": "2024-05-30T09:00:00Z",
             "additions": 12, "deletions": 3, "files_changed": 2},
            {"hash": "a2", "repository_id": 1, "committed_at": "2024-05-31T10:00:00Z",
             "additions": 5, "deletions": 1, "files_changed": 1},
            {"hash": "b1", "repository_id": 2, "committed_at": "2024-05-31T18:00:00Z",
             "additions": 40, "deletions": 0, "files_changed": 4},
            {"hash": "b2", "repository_id": 2, "committed_at": "2023-01-10T08:00:00Z",
             "additions": 2, "deletions": 2, "files_changed": 1},
        ],
        "repositories": [
            {"id": 1, "name": "api", "size": 800, "language": "Python", "stars": 3, "forks": 1},
            {"id": 2, "name": "web", "size": 1200, "language": "TypeScript"},
        ],
        "languages": [
            {"language": "Python", "commit_count": 2, "repository_count": 1,
             "first_seen_at": "2024-05-30T09:00:00Z", "last_seen_at": "2024-05-31T10:00:00Z"},
            {"language": "TypeScript", "commit_count": 2, "repository_count": 1,
             "first_seen_at": "2023-01-10T08:00:00Z", "last_seen_at": "2024-05-31T18:00:00Z"},
        ],
    }
