# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import docsbuild.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger to DEFAULT_TEST_LOG_LEVEL around each test.

    The logger is a module-level singleton, so a level set by one test
    (e.g. via --log-level in a CLI test) would otherwise leak into the next.
    """
    mod_logs.set_log_level(DEFAULT_TEST_LOG_LEVEL)
    yield
    mod_logs.set_log_level(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def clean_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's log-level variables from changing CLI behaviour."""
    for name in ("DOCSBUILD_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def clean_build_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host's build variables out of every test."""
    for name in (
        "NODE_ENV",
        "BPK_TOKENS",
        "ENABLE_CSS_MODULES",
        "BPK_BUILT_AT",
        "GOOGLE_MAPS_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
