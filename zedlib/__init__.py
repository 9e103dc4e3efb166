"""Character, string, number formatting, path and directory utilities."""

__version__ = "1.8.0"

__all__ = [
    "chars",
    "search",
    "splitting",
    "editing",
    "joining",
    "charsets",
    "numbers",
    "paths",
    "info",
    "listing",
]