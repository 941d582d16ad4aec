"""
Growth Insight - developer growth metrics from source-control activity.

Pure statistical transforms over commits, repositories and language
proficiency records: consistency, learning velocity, project depth,
depth/breadth, weekly commit rhythm and language adoption.
"""

__version__ = "0.1.0"

from .analytics import (
    analyze_commit_patterns,
    calculate_consistency_score,
    calculate_depth_breadth_ratio,
    calculate_learning_velocity,
    calculate_metrics,
    calculate_project_depth,
    calculate_skill_growth_trend,
    identify_growth_languages,
    identify_new_languages,
)
from .models import (
    ActivityData,
    Commit,
    CommitPatterns,
    DailyActivity,
    GrowthLanguage,
    LanguageProficiency,
    MetricsSnapshot,
    Repository,
)

__all__ = [
    "calculate_metrics",  # Main entry point
    "calculate_consistency_score",
    "calculate_learning_velocity",
    "calculate_project_depth",
    "calculate_depth_breadth_ratio",
    "calculate_skill_growth_trend",
    "analyze_commit_patterns",
    "identify_new_languages",
    "identify_growth_languages",
    "ActivityData",
    "Commit",
    "CommitPatterns",
    "DailyActivity",
    "GrowthLanguage",
    "LanguageProficiency",
    "MetricsSnapshot",
    "Repository",
]
