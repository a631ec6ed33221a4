"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from datetime import datetime

import pytest

from status_reporting import set_default_reporter
from status_reporting.config import runtime
from status_reporting.config.settings import APP_NAME_ENV, FLUSH_ENV, TIMEZONE_ENV

FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0)
FIXED_TIMESTAMP = "2024-01-01 00:00:00"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep developer .env files and STATUS_REPORTER_* variables out of tests."""
    for name in (APP_NAME_ENV, FLUSH_ENV, TIMEZONE_ENV):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (str(tmp_path / "missing.env"),))
    runtime.reset_default_values()
    set_default_reporter(None)
    yield
    runtime.reset_default_values()
    set_default_reporter(None)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def out_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def err_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def reporter(out_stream, err_stream, fixed_clock):
    from status_reporting import StatusReporter

    return StatusReporter(stdout=out_stream, stderr=err_stream, clock=fixed_clock)
