"""Log Service - validates incoming messages, renders them and prints them"""
import logging
from typing import Any, Iterable, Optional

from log_proxy.domain.entities.log_level import Level
from log_proxy.domain.entities.rendered_message import RenderedMessage
from log_proxy.domain.exceptions import MessageRequiredError
from log_proxy.infrastructure.console.console_writer import ConsoleWriter
from log_proxy.rendering.renderer import LogRenderer

logger = logging.getLogger(__name__)


def is_missing_message(message: Any) -> bool:
    """
    True when ``message`` counts as absent.

    Follows JavaScript truthiness: None, False, zero and the empty string are
    missing, while empty objects and arrays are real messages.
    """
    if message is None or message is False:
        return True
    if isinstance(message, str):
        return message == ""
    if isinstance(message, (int, float)) and not isinstance(message, bool):
        return message == 0
    return False


class LogService:
    def __init__(self, renderer: Optional[LogRenderer] = None, console: Optional[ConsoleWriter] = None):
        self.renderer = renderer or LogRenderer()
        self.console = console or ConsoleWriter()

    def ingest(self, message: Any, level: Any = Level.INFO.value) -> RenderedMessage:
        """Validate, render and print one client message."""
        if is_missing_message(message):
            logger.warning("⚠️ Rejected log request without a message")
            raise MessageRequiredError()

        normalized = Level.normalize(level)
        rendered = self.renderer.render(message, normalized)
        self.console.write_lines(rendered.lines)
        logger.debug(
            f"🖨️ Printed {'structured' if rendered.structured else 'plain'} "
            f"{normalized.value} message ({len(rendered.lines)} lines)"
        )
        return rendered

    def emit(self, message: Any, level: Level = Level.INFO) -> RenderedMessage:
        """Print a server-side notice through the same renderer."""
        rendered = self.renderer.render(message, level)
        self.console.write_lines(rendered.lines)
        return rendered

    def announce_startup(self, port: int) -> None:
        url = f"http://localhost:{port}"
        self.emit("Log Proxy Server Started!")
        self.emit(f"Listening on: {url}")
        self.emit(f"Send logs via: POST {url}")
        self.console.write_lines(self._usage_example(url))
        self.emit("Waiting for log messages...")

    def announce_shutdown(self) -> None:
        self.emit("Shutting down log proxy server...")

    def _usage_example(self, url: str) -> Iterable[str]:
        palette = self.renderer.palette
        example = [
            f"fetch('{url}', {{",
            "    method: 'POST',",
            "    headers: { 'Content-Type': 'application/json' },",
            "    body: JSON.stringify({ message: 'Your debug message' })",
            "});",
        ]
        return [
            "",
            palette.paint(palette.muted, "Example usage:"),
            *(palette.paint(palette.example, line) for line in example),
        ]
