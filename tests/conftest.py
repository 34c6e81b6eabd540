"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from tests.helpers import HELPER_ADDRESS, USDC_TEST_ADDRESS
from vaultlens.config import Config, default_config

# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def test_config() -> Config:
    """Config with distinct, non-mainnet addresses (not autouse)."""
    return Config(
        strategies_helper_address=HELPER_ADDRESS,
        usdc_address=USDC_TEST_ADDRESS,
    )


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
def isolate_vaultlens_env(request, monkeypatch):
    """Clear VAULTLENS_* env vars and the cached default config for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    default_config.cache_clear()
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith("VAULTLENS_"):
                monkeypatch.delenv(key, raising=False)
    yield
    default_config.cache_clear()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("pydantic").setLevel(logging.WARNING)
