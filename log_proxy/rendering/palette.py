"""ANSI color table used by the renderer."""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Mapping

from log_proxy.domain.entities.log_level import Level

# ANSI color codes
RESET = "\033[0m"
BOLD_BLUE = "\033[1;34m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
CYAN = "\033[36m"
MAGENTA = "\033[35m"
WHITE = "\033[37m"
GRAY = "\033[90m"

LEVEL_COLORS: Mapping[Level, str] = MappingProxyType({
    Level.INFO: GREEN,
    Level.WARN: YELLOW,
    Level.ERROR: RED,
    Level.DEBUG: CYAN,
})


@dataclass(frozen=True)
class Palette:
    """
    Immutable set of escape codes for every rendered element.

    An empty code means "no color"; ``paint`` then returns the text untouched,
    so a plain palette produces output with no escape sequences at all.
    """

    timestamp: str = GRAY
    message: str = WHITE
    key: str = BOLD_BLUE
    string: str = GREEN
    number: str = YELLOW
    boolean: str = MAGENTA
    null: str = GRAY
    punctuation: str = WHITE
    muted: str = GRAY
    example: str = CYAN
    reset: str = RESET
    levels: Mapping[Level, str] = field(default_factory=lambda: LEVEL_COLORS)

    @classmethod
    def ansi(cls) -> "Palette":
        return cls()

    @classmethod
    def plain(cls) -> "Palette":
        codes = {f.name: "" for f in fields(cls) if f.name != "levels"}
        return cls(levels=MappingProxyType({level: "" for level in Level}), **codes)

    def level_color(self, level: Level) -> str:
        return self.levels[level]

    def paint(self, code: str, text: str) -> str:
        if not code:
            return text
        return f"{code}{text}{self.reset}"
