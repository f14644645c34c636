from __future__ import annotations

import logging
import sys

from rich.console import Console

from sysbar.config import Settings
from sysbar.engine.aggregator import build_snapshot
from sysbar.render import BarTheme, ConsoleRenderer, Renderer, StatusBarRenderer

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def make_renderer(settings: Settings, console: Console) -> Renderer:
    if settings.mode == "console":
        return ConsoleRenderer()
    return StatusBarRenderer(
        theme=BarTheme.from_settings(settings),
        width_source=lambda: console.width,
    )


def main() -> int:
    """Collect one snapshot, render it once and print it to stdout."""
    settings = Settings()
    configure_logging(settings)

    console = Console()
    renderer = make_renderer(settings, console)
    snapshot = build_snapshot(settings, include_core_loads=settings.mode == "console")
    logger.debug("Rendering %s view", renderer.name)

    text = renderer.render(snapshot)
    if isinstance(renderer, ConsoleRenderer):
        # written verbatim: rich would expand tabs and wrap long lines
        sys.stdout.write(text.plain + "\n")
    else:
        console.print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
