"""
Shared pytest fixtures and configuration for fungi tests.

This module provides:
- A transform fixture that fails the test if it is ever called
- A structlog capture fixture that records library events with logger names
- Auto-marking of every test as ``unit``
"""

import pytest
import structlog
from structlog.testing import LogCapture

from fungi.logging import reset_logging


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Mark all tests without explicit markers as unit tests."""
    for item in items:
        markers = {mark.name for mark in item.iter_markers()}
        if "unit" not in markers:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def failing_transform():
    """A transform that fails the test if it is ever invoked."""

    def _transform(value):
        pytest.fail(f"transform must not be called, got {value!r}")

    return _transform


@pytest.fixture
def log_output():
    """Capture structlog events as dicts, including the stdlib logger name."""
    capture = LogCapture()
    structlog.configure(processors=[structlog.stdlib.add_logger_name, capture])
    yield capture.entries
    reset_logging()
