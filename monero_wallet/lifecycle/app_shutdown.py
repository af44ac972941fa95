"""Teardown helpers for the wallet shell."""

from __future__ import annotations

import logging
from typing import Any

from loguru import logger as loguru_logger
from PySide6.QtWidgets import QApplication

from ..ui import release_layouts
from .bootstrap import WalletShell

logger = logging.getLogger(__name__)

__all__ = ["cleanup_application_resources", "shutdown_gui"]


def _call_safely(obj: object, method_name: str, *args: Any) -> None:
    """Invoke an optional method on an object, logging failures."""

    method = getattr(obj, method_name, None)
    if not callable(method):
        return
    try:
        method(*args)
    except RuntimeError as exc:  # underlying C++ object already deleted
        logger.debug("Error while calling %s on %s: %s", method_name, obj, exc)


def cleanup_application_resources() -> None:
    """Drain pending Qt events, drop loaded layouts and flush log sinks."""

    app = QApplication.instance()
    if app is not None:
        app.processEvents()

    released = release_layouts()
    logger.debug("Released %d layout trees", released)

    loguru_logger.complete()
    for handler in logging.getLogger().handlers:
        handler.flush()
    logger.info("Released application resources")


def shutdown_gui(shell: WalletShell, *, perform_cleanup: bool = True) -> None:
    """Close open popovers and the main window, then clean up."""

    for popover in shell.popovers():
        if popover.isVisible():
            _call_safely(popover, "popdown")
    _call_safely(shell.window, "close")

    if perform_cleanup:
        cleanup_application_resources()
