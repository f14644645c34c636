from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HostInfo(BaseModel):
    """Identity of the machine the bar is drawn on."""

    model_config = ConfigDict(frozen=True)

    hostname: str = ""
    platform: str = ""
    platform_version: str = ""
    kernel_arch: str = ""
