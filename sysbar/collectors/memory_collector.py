from __future__ import annotations

import psutil

from sysbar.collectors.base import BaseCollector
from sysbar.errors import MetricUnavailable
from sysbar.models.usage import MemoryUsage


class MemoryCollector(BaseCollector):
    category = "memory"

    def collect(self) -> MemoryUsage:
        try:
            vm = psutil.virtual_memory()
        except (OSError, psutil.Error, RuntimeError) as exc:
            raise MetricUnavailable(self.category, str(exc)) from exc

        return MemoryUsage(
            total=vm.total,
            available=vm.available,
            used_percent=vm.percent,
        )
