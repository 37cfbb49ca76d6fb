"""Test configuration and fixtures for dirtree."""

import pytest

from dirtree.preferences import DEPTH_ENV_VAR, EXCLUDED_DIRS_ENV_VAR


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def clean_environ(monkeypatch):
    """Remove dirtree preference variables from the environment."""
    monkeypatch.delenv(DEPTH_ENV_VAR, raising=False)
    monkeypatch.delenv(EXCLUDED_DIRS_ENV_VAR, raising=False)
