"""Shared test fixtures."""

import logging

import pytest

from statecopy import AppState, build_initial_state


@pytest.fixture
def state() -> AppState:
    """Fresh demo state: bread and pizza in the cart, user logged in."""
    return build_initial_state()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep STATECOPY_* variables from the host out of settings."""
    for name in ("STATECOPY_REPORT_FORMAT", "STATECOPY_INDENT", "STATECOPY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() sets the package logger level; undo it after each test."""
    yield
    logging.getLogger("statecopy").setLevel(logging.NOTSET)
