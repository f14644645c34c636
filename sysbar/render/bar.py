from __future__ import annotations

import re
from typing import Callable

from rich.console import Console
from rich.style import Style
from rich.text import Text

from sysbar.engine.layout import remaining_width
from sysbar.models.snapshot import MetricsSnapshot
from sysbar.render.base import Renderer
from sysbar.render.theme import BarTheme
from sysbar.units import percent_bar, percent_fixed, to_gigabytes, to_megabytes, used_megabytes

WidthSource = Callable[[], int]


def _terminal_width() -> int:
    return Console().size.width


def make_cell(
    content: str,
    style: Style,
    *,
    width: int | None = None,
    align: str = "left",
    padding: int = 0,
) -> Text:
    """Styled cell; ``width`` includes padding, longer content is cropped."""
    text = Text(content, style=style)
    if width is not None:
        inner = width - 2 * padding
        if inner < 0:
            return Text(" " * width, style=style)
        text.align(align, inner)
    if padding:
        text.pad(padding)
    return text


# ── cell text ───────────────────────────────────────────


def title_case(value: str) -> str:
    """Capitalise every alphanumeric run: "opensuse-leap" -> "Opensuse-Leap"."""
    return re.sub(r"[^\W_]+", lambda m: m.group(0).capitalize(), value)


def platform_text(snapshot: MetricsSnapshot) -> str:
    name = version = ""
    if snapshot.host is not None:
        name = title_case(snapshot.host.platform)
        version = snapshot.host.platform_version
    return f"{name} {version}"


def host_text(snapshot: MetricsSnapshot) -> str:
    name = arch = ""
    if snapshot.host is not None:
        name = snapshot.host.hostname
        arch = snapshot.host.kernel_arch
    return f"{name} {arch}"


def cpu_text(snapshot: MetricsSnapshot) -> str:
    if not snapshot.cpu:
        return ""
    cpu = snapshot.cpu[0]
    return f"{cpu.model_name} {percent_fixed(cpu.mhz)} MHz"


def memory_text(snapshot: MetricsSnapshot) -> str:
    used = total = 0
    percent = 0.0
    if snapshot.memory is not None:
        total = to_megabytes(snapshot.memory.total)
        used = used_megabytes(snapshot.memory)
        percent = snapshot.memory.used_percent
    return f"Memory: {used} of {total} MB used ({percent_bar(percent)}%)"


def disk_text(snapshot: MetricsSnapshot) -> str:
    used = total = 0
    percent = 0.0
    if snapshot.disk is not None:
        total = to_gigabytes(snapshot.disk.total)
        used = to_gigabytes(snapshot.disk.used)
        percent = snapshot.disk.used_percent
    return f"Disk: {used} of {total} GB used ({percent_bar(percent)}%)"


class StatusBarRenderer(Renderer):
    """Two-line coloured bar fitted to the terminal width.

    Line 1: platform | host (centred, fills the gap) | CPU
    Line 2: memory (fills the gap) | disk

    The width is read from ``width_source`` on every call so a resize
    between runs of ``render()`` is picked up.
    """

    name = "bar"

    def __init__(self, theme: BarTheme | None = None, width_source: WidthSource | None = None) -> None:
        self.theme = theme or BarTheme()
        self._width_source = width_source or _terminal_width

    def render(self, snapshot: MetricsSnapshot) -> Text:
        width = self._width_source()
        bar = Text("\n", no_wrap=True, overflow="crop")
        return bar.join([self.top_line(snapshot, width), self.bottom_line(snapshot, width)])

    def top_line(self, snapshot: MetricsSnapshot, width: int) -> Text:
        theme = self.theme
        margin = Text(" " * theme.margin)

        platform_cell = Text.assemble(
            make_cell(platform_text(snapshot), theme.highlight_style, padding=theme.padding),
            margin,
        )
        cpu_cell = Text.assemble(
            margin,
            make_cell(cpu_text(snapshot), theme.highlight_style, padding=theme.padding),
        )
        host_cell = make_cell(
            host_text(snapshot),
            theme.text_style,
            width=remaining_width(width, platform_cell.cell_len, cpu_cell.cell_len),
            align="center",
        )
        return Text.assemble(platform_cell, host_cell, cpu_cell, no_wrap=True, overflow="crop")

    def bottom_line(self, snapshot: MetricsSnapshot, width: int) -> Text:
        theme = self.theme
        disk_cell = make_cell(disk_text(snapshot), theme.bar_style, align="right", padding=theme.padding)
        memory_cell = make_cell(
            memory_text(snapshot),
            theme.bar_style,
            width=remaining_width(width, disk_cell.cell_len),
            align="left",
            padding=theme.padding,
        )
        return Text.assemble(memory_cell, disk_cell, no_wrap=True, overflow="crop")
