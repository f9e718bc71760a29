import logging
import os
import sys

import pytest

# Add src to path so tests can run without installing package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from bloomkit.config.settings import SETTINGS


@pytest.fixture
def small_batches(monkeypatch):
    """Force add_many/contains_many onto the thread pool for tiny inputs."""
    monkeypatch.setattr(SETTINGS, 'parallel_threshold', 8)
    monkeypatch.setattr(SETTINGS, 'max_workers', 4)


@pytest.fixture
def clean_bloomkit_logger():
    """Restore the package logger after tests that configure it."""
    logger = logging.getLogger('bloomkit')
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
