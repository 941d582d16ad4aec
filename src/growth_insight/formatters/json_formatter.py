"""JSON formatter for Growth Insight."""

import json
from typing import Any

from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render reports as JSON."""

    def render(self, report: dict[str, Any]) -> None:
        print(self.format(report))

    def format(self, report: dict[str, Any]) -> str:
        return json.dumps(report, indent=2)
