"""
Logging configuration
=====================

The standard ``logging`` root owns the handlers (console, optional rotating
file). ``loguru`` records are propagated into it so both APIs end up in the
same sinks, and Qt's own diagnostics are routed to the ``qt`` logger.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from loguru import logger as loguru_logger

from ..config import ShellConfig
from ..errors import StartupError

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"

_HANDLER_MARK = "_monero_wallet_handler"


class PropagateHandler(logging.Handler):
    """Loguru sink that hands records to the matching stdlib logger."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


def create_console_handler(level: int = logging.INFO, fmt: Optional[str] = None) -> logging.StreamHandler:
    """Console handler writing to stderr with the shell's log format."""
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
    return handler


def create_rotating_file_handler(
    log_dir: Path,
    level: int = logging.INFO,
    fmt: Optional[str] = None,
) -> RotatingFileHandler:
    """UTF-8 rotating file handler, one file per process."""
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / f"monero_wallet_{os.getpid()}.log",
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or LOG_FORMAT))
    return handler


def configure_logging(config: ShellConfig) -> logging.Logger:
    """
    Configure the root logger and the loguru sink from ``config``.

    Calling it again replaces the handlers installed by the previous call,
    leaving foreign handlers (pytest's capture handler, for instance) alone.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [create_console_handler(config.log_level)]
    if config.log_dir is not None:
        try:
            handlers.append(create_rotating_file_handler(config.log_dir, config.log_level))
        except OSError as exc:
            raise StartupError(f"Cannot write logs to {config.log_dir}: {exc.strerror or exc}") from exc

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)
    root.setLevel(config.log_level)

    loguru_logger.remove()
    loguru_logger.add(
        PropagateHandler(),
        level=logging.getLevelName(config.log_level),
        format="{message}",
    )

    root.debug("Logging configured at level %s", logging.getLevelName(config.log_level))
    return root


def install_qt_message_handler() -> None:
    """Route qDebug/qWarning/qCritical output into the ``qt`` logger."""
    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    qt_logger = logging.getLogger("qt")
    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(mode, context, message):  # noqa: ANN001 - Qt callback signature
        qt_logger.log(levels.get(mode, logging.INFO), message)

    qInstallMessageHandler(_handler)
