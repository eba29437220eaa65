"""Pytest configuration and shared fixtures for okerr tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from okerr import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from okerr import Err

    return Err(ValueError('test error'))


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start from an uninitialized config and undo any logging setup."""
    import okerr._config

    monkeypatch.setattr(okerr._config, '_config', None)
    monkeypatch.delenv('OKERR_LOG_LEVEL', raising=False)

    package_logger = logging.getLogger('okerr')
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    structlog.reset_defaults()
