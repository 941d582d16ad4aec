"""Exception hierarchy for Growth Insight."""

from .base import GrowthInsightError
from .config import ConfigurationError, InvalidConfigError
from .data import DataError, InvalidRecordError, RecordLoadError

__all__ = [
    "GrowthInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "DataError",
    "InvalidRecordError",
    "RecordLoadError",
]
