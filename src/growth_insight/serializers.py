"""Report serialization - turns engine outputs into one JSON-ready contract.

Scale rules for consumers:
- Scores (consistency, depth, growth trend): ALWAYS 0-100 integers
- Velocity and ratios: ALWAYS floats rounded to 2 decimals
- Timestamps: ALWAYS ISO-8601 in UTC
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from . import analytics
from .analytics import as_utc
from .config import EngineConfig
from .models import ActivityData
from .narrative import productivity_pattern, skill_timeline
from .rollups import daily_activity


class ReportSerializer:
    """Runs the engine over one developer's activity and serializes every output."""

    def __init__(self, config: EngineConfig):
        self.config = config

    def serialize_metrics(self, data: ActivityData, now: datetime) -> dict[str, Any]:
        snapshot = analytics.calculate_metrics(
            data.repositories,
            data.commits,
            data.languages,
            now=now,
            growth_window_days=self.config.growth_window_days,
        )
        result = snapshot.to_dict()
        result["last_calculated_at"] = as_utc(now).isoformat()
        return result

    def serialize_patterns(self, data: ActivityData) -> dict[str, Any]:
        patterns = analytics.analyze_commit_patterns(data.commits)
        result = patterns.to_dict()
        result["productivity_pattern"] = productivity_pattern(patterns)
        return result

    def serialize_languages(self, data: ActivityData, now: datetime) -> dict[str, Any]:
        """Growth ranking, newly adopted languages and the per-language timeline."""
        return {
            "top_languages": [
                g.to_dict()
                for g in analytics.identify_growth_languages(
                    data.languages, self.config.top_languages
                )
            ],
            "new_languages": analytics.identify_new_languages(
                data.languages, self.config.new_language_window_days, now=now
            ),
            "timeline": skill_timeline(data.languages),
        }

    def serialize_activity(self, data: ActivityData) -> list[dict[str, Any]]:
        return [day.to_dict() for day in daily_activity(data.commits, data.repositories)]

    def report(self, data: ActivityData, now: datetime) -> dict[str, Any]:
        return {
            "metrics": self.serialize_metrics(data, now),
            "patterns": self.serialize_patterns(data),
            "languages": self.serialize_languages(data, now),
            "daily_activity": self.serialize_activity(data),
        }
