import re
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from log_proxy.config import Settings
from log_proxy.domain.services.log_service import LogService
from log_proxy.infrastructure.console.console_writer import ConsoleWriter
from log_proxy.main import create_app
from log_proxy.rendering import LogRenderer, Palette

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

FIXED_MOMENT = datetime(2024, 1, 15, 10, 30, 5, tzinfo=timezone.utc)


def strip_ansi(text):
    return ANSI_RE.sub("", text)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_MOMENT


@pytest.fixture
def renderer(fixed_clock):
    """Colorized renderer with a frozen clock."""
    return LogRenderer(palette=Palette.ansi(), clock=fixed_clock)


@pytest.fixture
def plain_renderer(fixed_clock):
    return LogRenderer(palette=Palette.plain(), clock=fixed_clock)


@pytest.fixture
def settings():
    return Settings(PORT=23465, MAX_BODY_SIZE=1024, COLOR=False)


@pytest.fixture
def log_service():
    # Real clock and stdout so capsys sees the output
    return LogService(renderer=LogRenderer(palette=Palette.plain()), console=ConsoleWriter())


@pytest.fixture
def app(settings, log_service):
    return create_app(settings, log_service=log_service)


@pytest.fixture
def client(app):
    return TestClient(app)
