"""Root conftest — shared test configuration."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """CLI runs install a handler on the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
