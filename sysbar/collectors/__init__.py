from .base import BaseCollector
from .cpu_collector import CoreLoadCollector, CpuCollector
from .disk_collector import DiskCollector
from .host_collector import HostCollector
from .memory_collector import MemoryCollector

__all__ = [
    "BaseCollector",
    "CoreLoadCollector",
    "CpuCollector",
    "DiskCollector",
    "HostCollector",
    "MemoryCollector",
]
