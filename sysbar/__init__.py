"""Terminal status bar showing host, CPU, memory and disk usage."""

__version__ = "0.1.0"
