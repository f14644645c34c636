from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MemoryUsage(BaseModel):
    """Virtual memory reading, byte counts as reported by the OS."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    available: int = Field(ge=0)
    used_percent: float = 0.0


class DiskUsage(BaseModel):
    """Filesystem usage for a single mount path."""

    model_config = ConfigDict(frozen=True)

    path: str = "/"
    total: int = Field(ge=0)
    used: int = Field(ge=0)
    free: int = Field(ge=0)
    used_percent: float = 0.0
