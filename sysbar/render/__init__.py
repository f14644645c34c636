from .bar import StatusBarRenderer
from .base import Renderer
from .console import ConsoleRenderer
from .theme import BarTheme

__all__ = [
    "BarTheme",
    "ConsoleRenderer",
    "Renderer",
    "StatusBarRenderer",
]
