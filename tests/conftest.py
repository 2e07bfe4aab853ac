"""Pytest configuration and fixtures.

Provides environment isolation, configuration reset and marker registration.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from verdict.config import set_config

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_verdict_env(request, monkeypatch):
    """Ensure a clean VERDICT_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("VERDICT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_process_config():
    """Drop any process-wide Config a test installed."""
    set_config(None)
    yield
    set_config(None)


# =============================================================================
# Logging & Markers
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Invariant and property tests for the outcome types",
        "allow_dotenv: Let python-dotenv read .env files",
        "allow_env_pollution: Keep VERDICT_* variables from the outer environment",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
