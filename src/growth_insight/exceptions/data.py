"""Input-data exceptions raised at the ingestion boundary."""

from pathlib import Path

from .base import GrowthInsightError


class DataError(GrowthInsightError):
    """Base class for activity-data errors."""
    pass


class InvalidRecordError(DataError):
    """Raised when a commit, repository or language record breaks its contract."""

    def __init__(self, collection: str, index: int, reason: str):
        super().__init__(
            f"Invalid {collection} record at index {index}",
            details={"collection": collection, "index": str(index), "reason": reason},
        )
        self.collection = collection
        self.index = index
        self.reason = reason


class RecordLoadError(DataError):
    """Raised when an activity file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot load activity data: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
