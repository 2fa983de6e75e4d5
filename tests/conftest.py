"""Shared fixtures for the otter-coach test suite."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Undo setup_logger() after each test so handlers never outlive the test streams."""
    yield
    logger.remove()
    logger.disable("otter_coach")
