"""Logging setup shared by the GUI entry point and the tests."""

from .setup import (
    LOG_FORMAT,
    configure_logging,
    create_console_handler,
    create_rotating_file_handler,
    install_qt_message_handler,
)

__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "create_console_handler",
    "create_rotating_file_handler",
    "install_qt_message_handler",
]
