"""
Monero Wallet - application entry point
=======================================

Creates the Qt application, loads the layouts, builds the shell and runs the
event loop. Startup failures are fatal and turn into a non-zero exit status.
"""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from loguru import logger
from PySide6.QtWidgets import QApplication

from . import __version__
from .config import ShellConfig
from .errors import ResolutionError, ShellError
from .lifecycle import WalletShell, build_wallet_shell, shutdown_gui
from .logging import configure_logging, install_qt_message_handler
from .ui import ACCOUNT_ACTIONS_LAYOUT, APP_LAYOUT, load_layout_source

EXIT_OK = 0
EXIT_STARTUP_FAILURE = 1
EXIT_RESOLUTION_FAILURE = 2


class WalletApplication(QApplication):
    """Qt application carrying the wallet's identity."""

    def __init__(self, args: Sequence[str], config: Optional[ShellConfig] = None):
        super().__init__(list(args))
        self.config = config or ShellConfig.from_env()
        self.setApplicationName(self.config.app_name)
        self.setApplicationVersion(__version__)
        self.setOrganizationDomain(self.config.organization_domain)
        self.setDesktopFileName(self.config.desktop_file_name)

        # Closing the main window is never vetoed; the last one quits.
        self.setQuitOnLastWindowClosed(True)

        logger.info("Starting {} ({})", self.config.app_name, self.config.app_id)

    def run(self, shell: WalletShell) -> int:
        return run_shell(self, shell)


def run_shell(app: QApplication, shell: WalletShell) -> int:
    """Show the shell, block in the event loop, then tear down."""
    shell.show()
    try:
        exit_code = app.exec()
    finally:
        shutdown_gui(shell)
    logger.info("Application closed with code {}", exit_code)
    return exit_code


def create_shell(config: ShellConfig) -> WalletShell:
    """Load both layout sources and build the shell from them."""
    app_layout = load_layout_source(APP_LAYOUT, directory=config.layout_dir)
    account_layout = load_layout_source(ACCOUNT_ACTIONS_LAYOUT, directory=config.layout_dir)
    return build_wallet_shell(app_layout, account_layout, config=config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Process entry point; ``argv`` goes to Qt untouched."""
    args = list(sys.argv if argv is None else argv)
    config = ShellConfig.from_env()

    try:
        configure_logging(config)
        install_qt_message_handler()
        app = QApplication.instance() or WalletApplication(args, config=config)
        shell = create_shell(config)
    except ResolutionError as exc:
        logger.critical("Widget resolution failed for {!r}: {}", exc.widget_id, exc)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_RESOLUTION_FAILURE
    except ShellError as exc:
        logger.critical("Startup failed: {}", exc)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_STARTUP_FAILURE

    try:
        if isinstance(app, WalletApplication):
            return app.run(shell)
        return run_shell(app, shell)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_OK
