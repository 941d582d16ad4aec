"""Base formatter interface for Growth Insight output rendering."""

from abc import ABC, abstractmethod
from typing import Any


class BaseFormatter(ABC):
    """Abstract base class for output formatters.

    A report is the dict built by ``ReportSerializer``; it may hold any
    subset of the ``metrics``, ``patterns``, ``languages``,
    ``daily_activity`` and ``context`` sections.
    """

    @abstractmethod
    def render(self, report: dict[str, Any]) -> None:
        """Render the report to the console."""

    @abstractmethod
    def format(self, report: dict[str, Any]) -> str:
        """Return formatted string representation of the report."""
