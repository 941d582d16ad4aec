"""Tests for growth_insight.loader module."""

import json
from datetime import datetime, timezone

import pytest

from growth_insight.exceptions import InvalidRecordError, RecordLoadError
from growth_insight.loader import load_activity, parse_activity, parse_timestamp


class TestParseTimestamp:
    """Tests for ISO-8601 parsing."""

    def test_z_suffix(self):
        assert parse_timestamp("2024-06-01T12:00:00Z") == datetime(2024, 6, 1, 12, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self):
        result = parse_timestamp("2024-06-01T07:00:00-05:00")
        assert result == datetime(2024, 6, 1, 12, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

    def test_naive_treated_as_utc(self):
        assert parse_timestamp("2024-06-01T12:00:00") == datetime(2024, 6, 1, 12, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [None, "", "yesterday", 1717243200])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestParseActivity:
    """Tests for building records from a decoded document."""

    def test_full_document(self, activity_payload, now):
        data = parse_activity(activity_payload, now)
        assert len(data.commits) == 4
        assert data.commits[0].hash == "a1"
        assert data.commits[0].additions == 12
        assert data.repositories[1].language == "TypeScript"
        assert data.repositories[1].stars == 0
        assert [lang.language for lang in data.languages] == ["Python", "TypeScript"]

    def test_missing_collections_are_empty(self, now):
        data = parse_activity({}, now)
        assert data.commits == []
        assert data.repositories == []
        assert data.languages == []

    def test_languages_derived_when_absent(self, activity_payload, now):
        del activity_payload["languages"]
        data = parse_activity(activity_payload, now)
        by_name = {lang.language: lang for lang in data.languages}
        assert set(by_name) == {"Python", "TypeScript"}
        assert by_name["TypeScript"].commit_count == 2
        assert by_name["TypeScript"].first_seen_at == datetime(2023, 1, 10, 8, tzinfo=timezone.utc)

    def test_empty_language_string_becomes_none(self, now):
        data = parse_activity({"repositories": [{"id": 1, "name": "x", "language": ""}]}, now)
        assert data.repositories[0].language is None

    def test_history_window_drops_old_commits(self, activity_payload, now):
        data = parse_activity(activity_payload, now, history_days=30)
        assert [c.hash for c in data.commits] == ["a1", "a2", "b1"]
        # explicit language rows are taken as given
        assert data.languages[1].commit_count == 2

    def test_no_history_window_keeps_everything(self, activity_payload, now):
        assert len(parse_activity(activity_payload, now, history_days=None).commits) == 4

    def test_languages_derived_from_kept_history(self, activity_payload, now):
        del activity_payload["languages"]
        data = parse_activity(activity_payload, now, history_days=365)
        by_name = {lang.language: lang for lang in data.languages}
        assert by_name["TypeScript"].commit_count == 1
        assert by_name["TypeScript"].first_seen_at == datetime(2024, 5, 31, 18, tzinfo=timezone.utc)

    def test_missing_committed_at(self, activity_payload, now):
        del activity_payload["commits"][2]["committed_at"]
        with pytest.raises(InvalidRecordError) as exc_info:
            parse_activity(activity_payload, now)
        assert exc_info.value.collection == "commits"
        assert exc_info.value.index == 2
        assert "committed_at" in exc_info.value.reason

    def test_bad_timestamp(self, activity_payload, now):
        activity_payload["commits"][0]["committed_at"] = "last tuesday"
        with pytest.raises(InvalidRecordError, match="commits"):
            parse_activity(activity_payload, now)

    def test_negative_count(self, activity_payload, now):
        activity_payload["repositories"][0]["size"] = -1
        with pytest.raises(InvalidRecordError) as exc_info:
            parse_activity(activity_payload, now)
        assert exc_info.value.reason == "size must be non-negative"

    @pytest.mark.parametrize("value", [1.5, "3", True])
    def test_non_integer_count(self, activity_payload, now, value):
        activity_payload["commits"][0]["additions"] = value
        with pytest.raises(InvalidRecordError, match="additions must be an integer"):
            parse_activity(activity_payload, now)

    def test_first_seen_after_last_seen(self, activity_payload, now):
        activity_payload["languages"][0]["first_seen_at"] = "2024-06-01T00:00:00Z"
        with pytest.raises(InvalidRecordError, match="first_seen_at is after last_seen_at"):
            parse_activity(activity_payload, now)

    def test_collection_must_be_list(self, now):
        with pytest.raises(InvalidRecordError, match="collection must be a list"):
            parse_activity({"commits": {"hash": "a"}}, now)

    def test_record_must_be_object(self, now):
        with pytest.raises(InvalidRecordError, match="record must be an object"):
            parse_activity({"repositories": ["api"]}, now)

    def test_repository_id_required(self, now):
        with pytest.raises(InvalidRecordError, match="id must be an integer id"):
            parse_activity({"repositories": [{"name": "api"}]}, now)


class TestLoadActivity:
    """Tests for reading activity files."""

    def test_reads_file(self, tmp_path, activity_payload, now):
        path = tmp_path / "activity.json"
        path.write_text(json.dumps(activity_payload), encoding="utf-8")
        data = load_activity(path, now)
        assert len(data.repositories) == 2

    def test_history_days_passed_through(self, tmp_path, activity_payload, now):
        path = tmp_path / "activity.json"
        path.write_text(json.dumps(activity_payload), encoding="utf-8")
        data = load_activity(path, now, history_days=365)
        assert len(data.commits) == 3

    def test_missing_file(self, tmp_path, now):
        with pytest.raises(RecordLoadError):
            load_activity(tmp_path / "nope.json", now)

    def test_invalid_json(self, tmp_path, now):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordLoadError) as exc_info:
            load_activity(path, now)
        assert exc_info.value.reason.startswith("invalid JSON")

    def test_top_level_must_be_object(self, tmp_path, now):
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(RecordLoadError, match="Cannot load activity data"):
            load_activity(path, now)
