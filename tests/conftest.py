"""Shared fixtures: an offscreen QApplication and the packaged layouts."""

from __future__ import annotations

import logging
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from loguru import logger as loguru_logger
from PySide6.QtWidgets import QApplication

from monero_wallet.ui import ACCOUNT_ACTIONS_LAYOUT, APP_LAYOUT, load_layout_source


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app

@pytest.fixture
def app_layout():
    return load_layout_source(APP_LAYOUT)

@pytest.fixture
def account_layout():
    return load_layout_source(ACCOUNT_ACTIONS_LAYOUT)

@pytest.fixture
def restore_logging():
    """Undo configure_logging() so later tests see the default setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)
