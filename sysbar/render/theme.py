from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from rich.style import Style

from sysbar.config import Settings


class BarTheme(BaseModel):
    """Colours and spacing for the status bar, fixed for one run."""

    model_config = ConfigDict(frozen=True)

    foreground: str = "#8CABFF"
    background: str = "#512B81"
    highlight_background: str = "#35155D"
    text_foreground: str = "#FFFFFF"
    padding: int = 1
    margin: int = 1

    @classmethod
    def dark(cls) -> BarTheme:
        return cls()

    @classmethod
    def light(cls) -> BarTheme:
        return cls(foreground="#FFFFFF", background="#000000")

    @classmethod
    def from_settings(cls, settings: Settings) -> BarTheme:
        return cls.light() if settings.light_background else cls.dark()

    # ── styles ──────────────────────────────────────────

    @property
    def bar_style(self) -> Style:
        return Style(color=self.foreground, bgcolor=self.background)

    @property
    def highlight_style(self) -> Style:
        return self.bar_style + Style(bgcolor=self.highlight_background, bold=True)

    @property
    def text_style(self) -> Style:
        return self.bar_style + Style(color=self.text_foreground, bold=True)
