"""
Terminal rendering for proxied log messages.

This package turns a message value and a level into colorized display lines:
- palette: immutable ANSI color table
- json_highlighter: line-local JSON syntax coloring
- renderer: timestamp, header and body assembly
"""

from .json_highlighter import colorize_json_line
from .palette import Palette
from .renderer import LogRenderer, as_structured, format_timestamp

__all__ = [
    "LogRenderer",
    "Palette",
    "as_structured",
    "colorize_json_line",
    "format_timestamp",
]
