from .aggregator import SnapshotAggregator, build_snapshot, default_collectors
from .layout import remaining_width

__all__ = [
    "SnapshotAggregator",
    "build_snapshot",
    "default_collectors",
    "remaining_width",
]
