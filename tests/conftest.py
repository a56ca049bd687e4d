"""Shared fixtures for the guardclause test-suite."""
from __future__ import annotations

import logging

import pytest

from guardclause.config import LOG_FAILURES_ENV
from guardclause.extensible import Extensible


@pytest.fixture()
def failure_logging(monkeypatch, caplog):
    """Enable failure logging and capture DEBUG records from the checks."""
    monkeypatch.setenv(LOG_FAILURES_ENV, "1")
    caplog.set_level(logging.DEBUG, logger="guardclause")
    return caplog


@pytest.fixture()
def clean_extensions():
    """Drop any extension checks a test registers on the marker class."""
    before = set(vars(Extensible))
    yield
    for name in set(vars(Extensible)) - before:
        delattr(Extensible, name)
