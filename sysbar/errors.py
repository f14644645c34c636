from __future__ import annotations


class MetricUnavailable(Exception):
    """A metrics query failed and its category cannot be reported."""

    def __init__(self, category: str, reason: str = "") -> None:
        self.category = category
        self.reason = reason
        message = f"{category} metrics unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
