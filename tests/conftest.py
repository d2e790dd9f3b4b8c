"""
Shared pytest fixtures for the Monkey test suite.
"""

import pytest

from monkey.config import set_default_config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test with no cached configuration and a clean environment."""
    for name in ("MONKEY_PROMPT", "MONKEY_OUTPUT_FORMAT", "MONKEY_STRICT", "MONKEY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)
