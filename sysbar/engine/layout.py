from __future__ import annotations


def remaining_width(total: int, *cells: int) -> int:
    """Width left for a flexible cell once the fixed cells are placed.

    Clamped at zero: when the fixed cells alone overflow the terminal the
    flexible cell collapses and the printed line is cropped instead.
    """
    return max(0, total - sum(cells))
