"""
Renderer for proxied log messages.

Turns a message value and a normalized level into the lines printed on the
terminal. Rendering is pure: the only outside input is the clock, which can be
replaced for tests.
"""

import json
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Union

from log_proxy.domain.entities.log_level import Level
from log_proxy.domain.entities.rendered_message import RenderedMessage
from log_proxy.rendering.json_highlighter import colorize_json_line
from log_proxy.rendering.palette import Palette
from log_proxy.utils.json_parsing import loads_strict

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Structured = Union[dict, list]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``YYYY-MM-DD HH:MM:SS``."""
    return moment.strftime(TIMESTAMP_FORMAT)


def as_structured(message: Any) -> Optional[Structured]:
    """
    Return the JSON object or array ``message`` stands for, or None.

    Dicts and lists are returned as they are. Strings are parsed as JSON and
    only count when they decode to an object or array; a string holding a JSON
    primitive (``"42"``, ``"true"``, ``'"quoted"'``) stays plain text.
    """
    if isinstance(message, (dict, list)):
        return message
    if not isinstance(message, str):
        return None

    try:
        parsed = loads_strict(message)
    except ValueError:
        return None
    if isinstance(parsed, (dict, list)):
        return parsed
    return None


# Integral floats from this magnitude up keep their float spelling
_EXPONENT_THRESHOLD = 1e21


def _integral_floats_as_ints(value: Any) -> Any:
    """Return ``value`` with integral floats turned into ints, so ``1.0`` prints as ``1``."""
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return int(value)
        return value
    if isinstance(value, dict):
        return {key: _integral_floats_as_ints(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_integral_floats_as_ints(item) for item in value]
    return value


def _display_text(message: Any) -> str:
    if isinstance(message, str):
        return message
    # Numbers and booleans print the way JSON spells them
    return json.dumps(_integral_floats_as_ints(message), ensure_ascii=False)


class LogRenderer:
    """Builds colorized display lines for one log message."""

    def __init__(
        self,
        palette: Optional[Palette] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.palette = palette or Palette.ansi()
        self._clock = clock

    def timestamp(self) -> str:
        return format_timestamp(self._clock())

    def header(self, timestamp: str, level: Level) -> str:
        palette = self.palette
        return (
            f"{palette.paint(palette.timestamp, f'[{timestamp}]')} "
            f"{palette.paint(palette.level_color(level), f'{level.value}:')}"
        )

    def render(self, message: Any, level: Level) -> RenderedMessage:
        """
        Render ``message`` at ``level``.

        Structured messages produce a bare header line followed by the
        pretty-printed, colorized JSON block. Everything else produces a single
        ``[timestamp] LEVEL: message`` line.
        """
        timestamp = self.timestamp()
        header = self.header(timestamp, level)
        structured = as_structured(message)

        if structured is None:
            body = self.palette.paint(self.palette.message, _display_text(message))
            return RenderedMessage(
                timestamp=timestamp,
                level=level,
                structured=False,
                lines=(f"{header} {body}",),
            )

        lines: List[str] = [header]
        lines.extend(self.render_json_block(structured))
        return RenderedMessage(
            timestamp=timestamp,
            level=level,
            structured=True,
            lines=tuple(lines),
        )

    def render_json_block(self, value: Structured) -> List[str]:
        # Key order is kept as received
        block = json.dumps(_integral_floats_as_ints(value), indent=2, ensure_ascii=False)
        return [colorize_json_line(line, self.palette) for line in block.split("\n")]
