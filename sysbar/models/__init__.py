from .cpu import CpuInfo
from .host import HostInfo
from .snapshot import CATEGORIES, MetricsSnapshot
from .usage import DiskUsage, MemoryUsage

__all__ = [
    "CATEGORIES",
    "CpuInfo",
    "DiskUsage",
    "HostInfo",
    "MemoryUsage",
    "MetricsSnapshot",
]
