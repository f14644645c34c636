from __future__ import annotations

import platform

from sysbar.collectors.base import BaseCollector
from sysbar.errors import MetricUnavailable
from sysbar.models.host import HostInfo


def _platform_identity() -> tuple[str, str]:
    """Return (platform id, platform version), e.g. ("ubuntu", "22.04")."""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        release = None

    if release:
        return release.get("ID", ""), release.get("VERSION_ID", "")

    system = platform.system().lower()
    if system == "darwin":
        return system, platform.mac_ver()[0]
    return system, platform.release()


class HostCollector(BaseCollector):
    """Reads hostname, OS platform/version and kernel architecture."""

    category = "host"

    def collect(self) -> HostInfo:
        try:
            hostname = platform.node()
            name, version = _platform_identity()
            arch = platform.machine()
        except (OSError, ValueError) as exc:
            raise MetricUnavailable(self.category, str(exc)) from exc

        if not hostname and not name:
            raise MetricUnavailable(self.category, "no host identity reported")

        return HostInfo(
            hostname=hostname,
            platform=name,
            platform_version=version,
            kernel_arch=arch,
        )
