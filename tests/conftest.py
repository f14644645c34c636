from __future__ import annotations

import pytest

from sysbar.models import CpuInfo, DiskUsage, HostInfo, MemoryUsage, MetricsSnapshot


@pytest.fixture
def full_snapshot() -> MetricsSnapshot:
    """The box1 reference machine: 8 GiB RAM, 100 GiB disk."""
    return MetricsSnapshot(
        host=HostInfo(
            hostname="box1",
            platform="ubuntu",
            platform_version="22.04",
            kernel_arch="x86_64",
        ),
        cpu=(CpuInfo(model_name="Gen9", mhz=3200.0),),
        memory=MemoryUsage(
            total=8589934592,
            available=2147483648,
            used_percent=75.0,
        ),
        disk=DiskUsage(
            path="/",
            total=107374182400,
            used=53687091200,
            free=53687091200,
            used_percent=50.0,
        ),
    )


@pytest.fixture
def empty_snapshot() -> MetricsSnapshot:
    return MetricsSnapshot()
