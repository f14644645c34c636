from __future__ import annotations

import platform
from pathlib import Path

import psutil

from sysbar.collectors.base import BaseCollector
from sysbar.errors import MetricUnavailable
from sysbar.models.cpu import CpuInfo

CPUINFO_PATH = Path("/proc/cpuinfo")


def _parse_cpuinfo(text: str) -> list[CpuInfo]:
    """Build one CpuInfo per ``processor`` block of /proc/cpuinfo."""
    records: list[CpuInfo] = []
    for block in text.strip().split("\n\n"):
        fields: dict[str, str] = {}
        for line in block.splitlines():
            key, sep, value = line.partition(":")
            if sep:
                fields[key.strip()] = value.strip()
        if "processor" not in fields:
            continue
        try:
            mhz = float(fields.get("cpu MHz", 0.0))
        except ValueError:
            mhz = 0.0
        records.append(
            CpuInfo(
                model_name=fields.get("model name", ""),
                family=fields.get("cpu family", ""),
                mhz=mhz,
            )
        )
    return records


class CpuCollector(BaseCollector):
    """Reads the CPU inventory: model name, family and clock speed."""

    category = "cpu"

    def __init__(self, cpuinfo_path: Path = CPUINFO_PATH) -> None:
        self.cpuinfo_path = cpuinfo_path

    def collect(self) -> tuple[CpuInfo, ...]:
        try:
            if self.cpuinfo_path.exists():
                records = _parse_cpuinfo(self.cpuinfo_path.read_text(encoding="utf-8", errors="ignore"))
                # Some kernels (ARM, VMs) omit "cpu MHz"
                if records and not any(r.mhz for r in records):
                    mhz = self._current_mhz()
                    records = [r.model_copy(update={"mhz": mhz}) for r in records]
            else:
                records = [CpuInfo(model_name=platform.processor(), mhz=self._current_mhz())]
        except (OSError, psutil.Error) as exc:
            raise MetricUnavailable(self.category, str(exc)) from exc

        if not records:
            raise MetricUnavailable(self.category, "no processors reported")
        return tuple(records)

    @staticmethod
    def _current_mhz() -> float:
        freq = psutil.cpu_freq()
        return float(freq.current) if freq else 0.0


class CoreLoadCollector(BaseCollector):
    """Samples per-core CPU utilisation in percent, in core order."""

    category = "cores"

    def __init__(self, interval: float = 0.0) -> None:
        self.interval = interval

    def collect(self) -> tuple[float, ...]:
        try:
            loads = psutil.cpu_percent(interval=self.interval, percpu=True)
        except (OSError, psutil.Error, ValueError) as exc:
            raise MetricUnavailable(self.category, str(exc)) from exc
        return tuple(float(p) for p in loads)
