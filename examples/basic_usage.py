#!/usr/bin/env python3
"""
Example: Basic usage of Growth Insight as a Python library
"""

from datetime import datetime, timezone
from pathlib import Path

from growth_insight import analyze_commit_patterns, calculate_metrics, identify_growth_languages
from growth_insight.loader import load_activity

now = datetime.now(timezone.utc)
data = load_activity(Path(__file__).parent / "activity.json", now)

snapshot = calculate_metrics(data.repositories, data.commits, data.languages, now=now)
patterns = analyze_commit_patterns(data.commits)

print(f"Consistency: {snapshot.consistency_score}/100")
print(f"Velocity:    {snapshot.learning_velocity:.2f} commits/day")
print(f"Depth:       {snapshot.project_depth}/100")
print(f"Peak day:    {patterns.peak_day}")

for lang in identify_growth_languages(data.languages, 3):
    print(f"  {lang.language}: {lang.commit_count} commits ({lang.growth})")
