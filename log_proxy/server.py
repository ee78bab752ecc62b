#!/usr/bin/env python3
"""
Log Proxy Server

Listens for log messages posted by client applications (browsers, sandboxed
runtimes) and prints them to this terminal with level colors and pretty
printed JSON.

Usage:
    log-proxy
    python -m log_proxy

Then clients can:
- POST / {"message": "...", "level": "INFO|WARN|ERROR|DEBUG"} - print a message
- GET  / - server status and usage

Configuration comes from the environment or a .env file (LOG_PROXY_PORT,
LOG_PROXY_HOST, LOG_PROXY_MAX_BODY_SIZE, LOG_PROXY_COLOR, LOG_LEVEL).
"""

import logging
import signal
import threading
from contextlib import contextmanager
from typing import Iterator

import uvicorn

from log_proxy.config import settings
from log_proxy.main import create_app

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class LogProxyServer(uvicorn.Server):
    """
    Uvicorn server that treats SIGINT and SIGTERM as a clean shutdown.

    Uvicorn re-raises the captured signal once serving stops; this server only
    restores the previous handlers, so the process exits with status 0.
    """

    @contextmanager
    def capture_signals(self) -> Iterator[None]:
        # Signal handlers can only be installed from the main thread
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        original_handlers = {sig: signal.signal(sig, self.handle_exit) for sig in HANDLED_SIGNALS}
        try:
            yield
        finally:
            for sig, handler in original_handlers.items():
                signal.signal(sig, handler)


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info(f"🚀 Starting log proxy on {settings.HOST}:{settings.PORT}")

    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        access_log=settings.ACCESS_LOG,
        log_level=settings.LOG_LEVEL.lower(),
    )
    LogProxyServer(config).run()


if __name__ == "__main__":
    main()
