"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from vessel import config

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
    monkeypatch.setattr(config, "load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_vessel_env(request, monkeypatch):
    """Clear VESSEL_* variables and cached environment settings around each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(config.ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    config.reset_env_cache()
    yield
    config.reset_env_cache()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
    logging.getLogger("dotenv").setLevel(logging.WARNING)


# =============================================================================
# Helpers (not autouse)
# =============================================================================


@pytest.fixture
def calls():
    """Return a list-backed recorder for side-effect assertions."""
    recorded: list[object] = []

    def record(*args: object) -> None:
        recorded.append(args[0] if len(args) == 1 else args)

    record.calls = recorded  # type: ignore[attr-defined]
    return record
