"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and shared registry
fixtures. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from statuses import StatusRegistry, build_registry, default_registry
from statuses.config import StatusesConfig

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
def isolate_statuses_env(request, monkeypatch, tmp_path):
    """Ensure a clean configuration environment for each test.

    Clears STATUSES_* env vars and points the project and home config files
    at empty locations under ``tmp_path``.
    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("STATUSES_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("STATUSES_PYPROJECT_PATH", str(tmp_path / "pyproject.toml"))
    monkeypatch.setenv("STATUSES_CONFIG_HOME", str(tmp_path / "home.toml"))


@pytest.fixture(autouse=True)
def fresh_default_registry():
    """Drop the cached default registry around each test."""
    default_registry.cache_clear()
    yield
    default_registry.cache_clear()


# =============================================================================
# Registries
# =============================================================================


@pytest.fixture
def registry() -> StatusRegistry:
    """Registry over the bundled table with default (lenient) parsing."""
    return build_registry()


@pytest.fixture
def strict_registry() -> StatusRegistry:
    """Registry over the bundled table with whole-string numeric parsing."""
    return build_registry(config=StatusesConfig(strict_parse=True))
