"""Pytest configuration and fixtures for test suite."""

import os

import pytest

# Set test environment BEFORE any app imports so create_app never exits
os.environ.setdefault("FLASK_ENV", "testing")
os.environ.setdefault("FLASK_DEBUG", "false")

from tipcalc.config import get_config  # noqa: E402

_TIPCALC_ENV = (
    "TIPCALC_DEFAULT_TIP_PERCENT",
    "TIPCALC_DEFAULT_LOCALE",
    "TIPCALC_SUPPORTED_LOCALES",
    "TIPCALC_CURRENCY",
    "TIPCALC_LOG_LEVEL",
    "TIPCALC_HOST",
    "TIPCALC_PORT",
    "CORS_ORIGINS",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default configuration."""
    for name in _TIPCALC_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FLASK_ENV", "testing")
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def app():
    from tipcalc.app import create_app
    app = create_app()
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
