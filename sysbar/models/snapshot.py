from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from sysbar.models.cpu import CpuInfo
from sysbar.models.host import HostInfo
from sysbar.models.usage import DiskUsage, MemoryUsage

CATEGORIES = ("host", "cpu", "memory", "disk")


class MetricsSnapshot(BaseModel):
    """Point-in-time bundle of host readings taken once per run.

    Each category is ``None`` when its query failed. A present record
    holding zero readings is a real measurement, not a failure.
    """

    model_config = ConfigDict(frozen=True)

    host: HostInfo | None = None
    cpu: tuple[CpuInfo, ...] | None = None
    memory: MemoryUsage | None = None
    disk: DiskUsage | None = None
    core_loads: tuple[float, ...] | None = None

    def missing_categories(self) -> list[str]:
        return [name for name in CATEGORIES if getattr(self, name) is None]
