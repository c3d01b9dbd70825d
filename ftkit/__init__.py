"""String, memory, linked-list, ASCII, colour-name and XPM image utilities."""

__version__ = "0.1.0"

__all__ = ["chars", "colors", "conversions", "linked", "memory", "output", "strutil", "xpm"]