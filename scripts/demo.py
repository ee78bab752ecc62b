#!/usr/bin/env python3
"""
Show what a structured log message looks like in the terminal.

Renders a sample nested payload through the real renderer without starting
the server.

Usage:
    python scripts/demo.py
"""

from log_proxy.domain.entities.log_level import Level
from log_proxy.infrastructure.console.console_writer import ConsoleWriter
from log_proxy.rendering import LogRenderer

SAMPLE_PAYLOAD = {
    "payload": {
        "type": "info",
        "text": "Hello from cURL",
        "meta": {"count": 42, "ratio": -0.5, "cached": False, "owner": None},
    }
}


def main() -> None:
    console = ConsoleWriter()
    renderer = LogRenderer()

    print("=== LOG PROXY JSON OUTPUT DEMO ===\n")
    console.write_lines(renderer.render(SAMPLE_PAYLOAD, Level.INFO).lines)
    console.write_lines(renderer.render("Plain text messages stay on one line", Level.WARN).lines)
    print("\n=== END DEMO ===")
    print("\nIn a real terminal this shows:")
    print("- Gray timestamp")
    print("- Level label colored by severity")
    print("- Indented JSON with colored keys, strings, numbers, booleans and null")


if __name__ == "__main__":
    main()
