"""Pytest configuration and fixtures."""

import logging

import pytest
import structlog

from resulttype.result import Err, Ok


@pytest.fixture
def mixed_results():
    """Batch with two failures after a success."""
    return [Ok(1), Err("x"), Err("y")]


@pytest.fixture
def passing_results():
    """Batch with no failures."""
    return [Ok(1), Ok("two"), Ok(None)]


@pytest.fixture
def reset_logging():
    """Restore structlog and root logger state after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
