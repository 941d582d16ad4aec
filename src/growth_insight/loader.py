"""Load activity records from JSON and validate them at the boundary.

Expected document shape::

    {
      "commits": [{"hash": "...", "repository_id": 1, "committed_at": "2024-05-01T12:00:00Z",
                   "additions": 10, "deletions": 2, "files_changed": 3}],
      "repositories": [{"id": 1, "name": "api", "size": 420, "language": "Python"}],
      "languages": [{"language": "Python", "commit_count": 12, "repository_count": 1,
                     "first_seen_at": "...", "last_seen_at": "..."}]
    }

``languages`` is optional; when it is missing the rows are derived from the
repositories and commits. Anything that breaks a record's contract raises
``InvalidRecordError`` here, so the analytics engine only ever sees
well-formed data.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .analytics import as_utc
from .exceptions import InvalidRecordError, RecordLoadError
from .logging_config import get_logger
from .models import ActivityData, Commit, LanguageProficiency, Repository
from .rollups import derive_language_proficiency, filter_history

logger = get_logger(__name__)


def load_activity(
    path: Path, now: datetime, history_days: Optional[int] = None
) -> ActivityData:
    """Read and validate an activity JSON file.

    Args:
        path: JSON document with commits, repositories and (optionally) languages
        now: Reference instant for the history window and derived languages
        history_days: Keep only commits from the trailing window of this many
            days; None keeps the full history

    Raises:
        RecordLoadError: If the file cannot be read or is not a JSON object
        InvalidRecordError: If any record is malformed
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RecordLoadError(path, str(e))
    except json.JSONDecodeError as e:
        raise RecordLoadError(path, f"invalid JSON: {e}")

    if not isinstance(payload, dict):
        raise RecordLoadError(path, "top level must be a JSON object")

    data = parse_activity(payload, now, history_days)
    logger.info(
        "Loaded %d commits, %d repositories, %d languages from %s",
        len(data.commits),
        len(data.repositories),
        len(data.languages),
        path,
    )
    return data


def parse_activity(
    payload: dict[str, Any], now: datetime, history_days: Optional[int] = None
) -> ActivityData:
    """Build validated records from an already-decoded document.

    Commits outside the trailing ``history_days`` window are dropped before
    languages are derived, so derived rows only reflect the kept history.
    """
    commits = [
        _parse_commit(i, raw) for i, raw in enumerate(_collection(payload, "commits"))
    ]
    repositories = [
        _parse_repository(i, raw) for i, raw in enumerate(_collection(payload, "repositories"))
    ]

    if history_days is not None:
        kept = filter_history(commits, now, history_days)
        logger.debug(
            "History window of %d days kept %d of %d commits",
            history_days,
            len(kept),
            len(commits),
        )
        commits = kept

    if payload.get("languages") is None:
        languages = derive_language_proficiency(repositories, commits, now)
        logger.debug("Derived %d language rows from repositories", len(languages))
    else:
        languages = [
            _parse_language(i, raw) for i, raw in enumerate(_collection(payload, "languages"))
        ]

    return ActivityData(commits=commits, repositories=repositories, languages=languages)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 string (``Z`` suffix allowed) to an aware UTC datetime.

    Returns None when the value is not a parseable string.
    """
    if not isinstance(value, str) or not value:
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(value))
    except ValueError:
        return None


def _collection(payload: dict[str, Any], name: str) -> list[Any]:
    items = payload.get(name)
    if items is None:
        return []
    if not isinstance(items, list):
        raise InvalidRecordError(name, -1, "collection must be a list")
    return items


def _require_mapping(collection: str, index: int, raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise InvalidRecordError(collection, index, "record must be an object")
    return raw


def _count(collection: str, index: int, raw: dict[str, Any], key: str) -> int:
    value = raw.get(key, 0)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(collection, index, f"{key} must be an integer")
    if value < 0:
        raise InvalidRecordError(collection, index, f"{key} must be non-negative")
    return value


def _timestamp(collection: str, index: int, raw: dict[str, Any], key: str) -> datetime:
    if key not in raw or raw[key] is None:
        raise InvalidRecordError(collection, index, f"{key} is required")
    moment = parse_timestamp(raw[key])
    if moment is None:
        raise InvalidRecordError(collection, index, f"{key} is not an ISO-8601 timestamp")
    return moment


def _text(collection: str, index: int, raw: dict[str, Any], key: str, required: bool) -> str:
    value = raw.get(key)
    if value is None:
        if required:
            raise InvalidRecordError(collection, index, f"{key} is required")
        return ""
    if not isinstance(value, str):
        raise InvalidRecordError(collection, index, f"{key} must be a string")
    return value


def _identifier(collection: str, index: int, raw: dict[str, Any], key: str) -> int:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(collection, index, f"{key} must be an integer id")
    return value


def _parse_commit(index: int, raw: Any) -> Commit:
    raw = _require_mapping("commits", index, raw)
    return Commit(
        hash=_text("commits", index, raw, "hash", required=True),
        repository_id=_identifier("commits", index, raw, "repository_id"),
        committed_at=_timestamp("commits", index, raw, "committed_at"),
        additions=_count("commits", index, raw, "additions"),
        deletions=_count("commits", index, raw, "deletions"),
        files_changed=_count("commits", index, raw, "files_changed"),
        message=_text("commits", index, raw, "message", required=False),
        author=_text("commits", index, raw, "author", required=False),
    )


def _parse_repository(index: int, raw: Any) -> Repository:
    raw = _require_mapping("repositories", index, raw)
    language = _text("repositories", index, raw, "language", required=False)
    return Repository(
        id=_identifier("repositories", index, raw, "id"),
        name=_text("repositories", index, raw, "name", required=True),
        size=_count("repositories", index, raw, "size"),
        language=language or None,
        stars=_count("repositories", index, raw, "stars"),
        forks=_count("repositories", index, raw, "forks"),
    )


def _parse_language(index: int, raw: Any) -> LanguageProficiency:
    raw = _require_mapping("languages", index, raw)
    first_seen = _timestamp("languages", index, raw, "first_seen_at")
    last_seen = _timestamp("languages", index, raw, "last_seen_at")
    if first_seen > last_seen:
        raise InvalidRecordError("languages", index, "first_seen_at is after last_seen_at")
    return LanguageProficiency(
        language=_text("languages", index, raw, "language", required=True),
        commit_count=_count("languages", index, raw, "commit_count"),
        repository_count=_count("languages", index, raw, "repository_count"),
        first_seen_at=first_seen,
        last_seen_at=last_seen,
    )
