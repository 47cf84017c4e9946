# conftest.py

"""
Pytest configuration and fixtures.
"""
import logging
import os

os.environ["ENVIRONMENT"] = "test"

import pytest


@pytest.fixture(autouse=True)
def restore_trade_client_logger():
    """Undo configure_logging() so caplog keeps seeing trade_client records."""
    logger = logging.getLogger("trade_client")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
