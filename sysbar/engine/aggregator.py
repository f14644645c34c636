from __future__ import annotations

import logging

from sysbar.collectors import (
    CoreLoadCollector,
    CpuCollector,
    DiskCollector,
    HostCollector,
    MemoryCollector,
)
from sysbar.collectors.base import BaseCollector
from sysbar.config import Settings
from sysbar.models.snapshot import MetricsSnapshot

logger = logging.getLogger(__name__)


class SnapshotAggregator:
    """Runs each collector once, in order, and bundles what succeeded.

    A failing collector leaves its snapshot field as ``None``; the others
    are unaffected and the build never aborts early.
    """

    def __init__(self, collectors: list[BaseCollector]) -> None:
        self._collectors = collectors

    def build(self) -> MetricsSnapshot:
        fields: dict[str, object] = {}
        for collector in self._collectors:
            fields[self._field_for(collector)] = collector.safe_collect()

        snapshot = MetricsSnapshot(**fields)
        missing = snapshot.missing_categories()
        if missing:
            logger.debug("Snapshot built without: %s", ", ".join(missing))
        return snapshot

    @staticmethod
    def _field_for(collector: BaseCollector) -> str:
        if collector.category == "cores":
            return "core_loads"
        return collector.category


def default_collectors(settings: Settings, include_core_loads: bool = False) -> list[BaseCollector]:
    """Host, CPU, memory and disk in that order, optionally per-core load last."""
    collectors: list[BaseCollector] = [
        HostCollector(),
        CpuCollector(),
        MemoryCollector(),
        DiskCollector(settings.disk_path),
    ]
    if include_core_loads:
        collectors.append(CoreLoadCollector(interval=settings.core_sample_interval))
    return collectors


def build_snapshot(settings: Settings, include_core_loads: bool = False) -> MetricsSnapshot:
    return SnapshotAggregator(default_collectors(settings, include_core_loads)).build()
