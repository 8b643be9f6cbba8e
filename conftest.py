"""Shared pytest fixtures."""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect the messages loguru emits at WARNING level and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def info_messages():
    """Collect the messages loguru emits at INFO level and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="INFO")
    yield messages
    logger.remove(handler_id)
