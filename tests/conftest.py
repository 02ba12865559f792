"""
Test configuration and fixtures for PCSet.

This file contains pytest configuration and shared fixtures
for testing the PCSet toolkit.
"""

import logging

import pytest

from pcset.config import reset_config
from pcset.logger import apply_logging_config


class _RecordingHandler(logging.Handler):
    """Collects log records emitted under the pcset namespace."""
    
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []
    
    def emit(self, record):
        self.records.append(record)


@pytest.fixture(autouse=True)
def clean_config():
    """Restore the global configuration and logging after every test."""
    yield
    reset_config()
    apply_logging_config()


@pytest.fixture
def base_set():
    """The pentachord used throughout the set operation tests."""
    return [0, 3, 5, 6, 9]


@pytest.fixture
def alpha_symbols():
    """Every alpha symbol in both cases."""
    return ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', 'A', 'a', 'B', 'b', 'C', 'c']


@pytest.fixture
def log_records():
    """Capture records from the pcset logger, which does not propagate."""
    pcset_logger = logging.getLogger('pcset')
    handler = _RecordingHandler()
    previous_level = pcset_logger.level
    pcset_logger.addHandler(handler)
    pcset_logger.setLevel(logging.DEBUG)
    yield handler.records
    pcset_logger.removeHandler(handler)
    pcset_logger.setLevel(previous_level)


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
