"""Tests for growth_insight.formatters package."""

import json

import pytest
from rich.console import Console

from growth_insight.formatters import JsonFormatter, RichFormatter, get_formatter

REPORT = {
    "metrics": {
        "consistency_score": 80,
        "skill_growth_trend": 25,
        "learning_velocity": 0.4,
        "project_depth": 52,
        "depth_breadth_ratio": 1.0,
        "total_commits": 4,
        "total_repositories": 2,
        "unique_languages": 2,
        "last_calculated_at": "2024-06-01T12:00:00+00:00",
    },
    "patterns": {
        "average_commits_per_day": 0.57,
        "peak_day": "Friday",
        "bursty_pattern": True,
        "consistent_pattern": False,
        "productivity_pattern": "Burst-based",
    },
    "languages": {
        "top_languages": [{"language": "Python", "commit_count": 2, "growth": "Low"}],
        "new_languages": ["Python"],
        "timeline": [],
    },
    "daily_activity": [
        {
            "day": "2024-05-31",
            "commits": 2,
            "repositories": 2,
            "languages": 2,
            "additions": 45,
            "deletions": 1,
            "files_changed": 5,
        }
    ],
}


class TestGetFormatter:
    def test_known_names(self):
        assert isinstance(get_formatter("json"), JsonFormatter)
        assert isinstance(get_formatter("rich"), RichFormatter)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    def test_round_trips(self):
        assert json.loads(JsonFormatter().format(REPORT)) == REPORT


class TestRichFormatter:
    """Rich output is rendered into a recording console."""

    def _render(self, report):
        target = Console(record=True, width=120)
        RichFormatter(target).render(report)
        return target.export_text()

    def test_renders_every_section(self):
        text = self._render(REPORT)
        assert "Developer Growth" in text
        assert "80/100" in text
        assert "Friday" in text
        assert "Burst-based" in text
        assert "Top Languages" in text
        assert "New languages: Python" in text
        assert "2024-05-31" in text

    def test_activity_columns(self):
        text = self._render({"daily_activity": REPORT["daily_activity"]})
        assert "Repos" in text
        assert "Langs" in text

    def test_empty_activity(self):
        assert "No commit activity" in self._render({"daily_activity": []})

    def test_context_section(self):
        text = self._render({"context": {"peak_day": "Monday"}})
        assert "Narrative Context" in text
        assert "peak_day" in text
