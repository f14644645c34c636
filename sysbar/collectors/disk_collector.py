from __future__ import annotations

import psutil

from sysbar.collectors.base import BaseCollector
from sysbar.errors import MetricUnavailable
from sysbar.models.usage import DiskUsage


class DiskCollector(BaseCollector):
    """Reports filesystem usage for one mount path (``/`` by default)."""

    category = "disk"

    def __init__(self, path: str = "/") -> None:
        self.path = path

    def collect(self) -> DiskUsage:
        try:
            usage = psutil.disk_usage(self.path)
        except (OSError, psutil.Error) as exc:
            raise MetricUnavailable(self.category, str(exc)) from exc

        return DiskUsage(
            path=self.path,
            total=usage.total,
            used=usage.used,
            free=usage.free,
            used_percent=usage.percent,
        )
