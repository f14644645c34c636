from __future__ import annotations

from abc import ABC, abstractmethod

from rich.text import Text

from sysbar.models.snapshot import MetricsSnapshot


class Renderer(ABC):
    """Turns a snapshot into printable text. One strategy per output mode."""

    name: str = "base"

    @abstractmethod
    def render(self, snapshot: MetricsSnapshot) -> Text:
        ...
