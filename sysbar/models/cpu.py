from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CpuInfo(BaseModel):
    """One logical processor as reported by the OS."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = ""
    family: str = ""
    mhz: float = 0.0
