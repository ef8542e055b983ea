"""
Pytest configuration and shared fixtures for gf tests.
"""
import contextlib

import pytest
from loguru import logger


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Point HOME at an empty temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def config_dir(home):
    """Create ~/.config/gf so it is picked as the pattern directory."""
    d = home / ".config" / "gf"
    d.mkdir(parents=True)
    return d


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    # The CLI replaces handlers on every invocation
    with contextlib.suppress(ValueError):
        logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks bound to streams that only lived for one test."""
    yield
    logger.remove()
