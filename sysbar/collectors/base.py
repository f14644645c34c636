from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from sysbar.errors import MetricUnavailable

logger = logging.getLogger(__name__)


class BaseCollector(ABC):
    """Abstract base for all metric collectors.

    Subclasses implement ``collect()``, which performs one blocking query
    and either returns a record or raises ``MetricUnavailable``.
    ``safe_collect()`` turns that failure, or any unexpected provider
    error, into ``None`` so a missing category never stops the rest of
    the bar from rendering.
    """

    category: str = "base"

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    def collect(self) -> Any:
        """Query the OS and return this category's record."""
        ...

    # ── best-effort wrapper ─────────────────────────────

    def safe_collect(self) -> Any | None:
        try:
            return self.collect()
        except MetricUnavailable as exc:
            logger.debug("Collector [%s] skipped: %s", self.category, exc)
            return None
        except Exception:
            logger.debug("Collector [%s] error during collect()", self.category, exc_info=True)
            return None
