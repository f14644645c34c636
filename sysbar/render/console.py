from __future__ import annotations

from typing import Sequence

from rich.text import Text

from sysbar.models.snapshot import MetricsSnapshot
from sysbar.render.base import Renderer
from sysbar.units import percent_fixed, split_cores, to_gigabytes, to_megabytes


def host_lines(snapshot: MetricsSnapshot) -> list[str]:
    host = snapshot.host
    if host is None:
        return []
    return [
        f"Hostname: {host.hostname}",
        f"Operating System: {host.platform} {host.platform_version} ({host.kernel_arch})",
    ]


def cpu_lines(snapshot: MetricsSnapshot) -> list[str]:
    if not snapshot.cpu:
        return []
    cpu = snapshot.cpu[0]
    return [f"Model Name: {cpu.model_name} Family: {cpu.family} Speed: {percent_fixed(cpu.mhz)} MHz"]


def memory_lines(snapshot: MetricsSnapshot) -> list[str]:
    mem = snapshot.memory
    if mem is None:
        return []
    return [
        f"Total memory: {to_megabytes(mem.total)} MB",
        f"Free memory: {to_megabytes(mem.available)} MB",
        f"Percentage used memory: {percent_fixed(mem.used_percent)} %",
    ]


def disk_lines(snapshot: MetricsSnapshot) -> list[str]:
    disk = snapshot.disk
    if disk is None:
        return []
    return [
        f"Total disk space: {to_gigabytes(disk.total)} GB",
        f"Used disk space: {to_gigabytes(disk.used)} GB",
        f"Free disk space: {to_gigabytes(disk.free)} GB",
        f"Percentage disk space usage: {percent_fixed(disk.used_percent)} %",
    ]


def core_lines(loads: Sequence[float]) -> list[str]:
    """``Cores:`` header then one line per core, indices 0..N-1.

    The list is walked as two floor-split halves; the second pass offsets
    its indices by the length of the first.
    """
    first, second = split_cores(loads)
    lines = ["Cores:"]
    for idx, percent in enumerate(first):
        lines.append(f"\tCPU [{idx}]: {percent_fixed(percent)} %")

    offset = len(first)
    for idx, percent in enumerate(second):
        lines.append(f"\tCPU [{idx + offset}]: {percent_fixed(percent)} %")
    return lines


class ConsoleRenderer(Renderer):
    """Plain multi-line report, one fact per line."""

    name = "console"

    def render(self, snapshot: MetricsSnapshot) -> Text:
        lines = host_lines(snapshot) + cpu_lines(snapshot) + memory_lines(snapshot) + disk_lines(snapshot)
        if snapshot.core_loads is not None:
            lines += core_lines(snapshot.core_loads)
        return Text("\n".join(lines))
