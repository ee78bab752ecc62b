from enum import Enum
from typing import Any


class Level(str, Enum):
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"

    @classmethod
    def normalize(cls, value: Any) -> "Level":
        """Map a client-supplied level onto the closed set, defaulting to INFO."""
        if not isinstance(value, str):
            return cls.INFO
        try:
            return cls(value.upper())
        except ValueError:
            return cls.INFO
