from dataclasses import dataclass
from typing import Tuple

from log_proxy.domain.entities.log_level import Level


@dataclass(frozen=True)
class RenderedMessage:
    timestamp: str
    level: Level
    structured: bool
    lines: Tuple[str, ...]
