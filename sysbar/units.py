"""Unit conversion and number formatting shared by both renderers."""

from __future__ import annotations

from typing import Sequence

from sysbar.models.usage import MemoryUsage

MEGABYTE = 1024 * 1024
GIGABYTE = MEGABYTE * 1024


def to_megabytes(num_bytes: int) -> int:
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    return num_bytes // MEGABYTE


def to_gigabytes(num_bytes: int) -> int:
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    return num_bytes // GIGABYTE


def used_megabytes(memory: MemoryUsage) -> int:
    """Used memory derived as total minus available, both truncated to MB.

    This can drift from the OS's own "used" figure; available and used are
    not exact complements in most memory accounting.
    """
    return to_megabytes(memory.total) - to_megabytes(memory.available)


def split_cores(loads: Sequence[float]) -> tuple[list[float], list[float]]:
    """Split at ``len // 2``; an odd remainder goes to the second half."""
    mid = len(loads) // 2
    return list(loads[:mid]), list(loads[mid:])


def percent_bar(value: float) -> str:
    # zero decimals, width 2
    return "%2.f" % value


def percent_fixed(value: float) -> str:
    return "%.2f" % value
