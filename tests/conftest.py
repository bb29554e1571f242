"""
Global pytest configuration and fixtures for the multiselect test suite.
Runs Qt on the offscreen platform so GUI tests work without a display.
"""

import logging
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring a QApplication")


@pytest.fixture
def abc_labels():
    return ["a", "b", "c"]


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging() runs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
