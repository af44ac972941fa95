"""Lifecycle helpers: startup wiring and teardown."""

from __future__ import annotations

from .app_shutdown import cleanup_application_resources, shutdown_gui
from .bootstrap import (
    PopoverBinding,
    WalletShell,
    build_wallet_shell,
    connect_popover,
    insert_account_entry,
)

__all__ = [
    "PopoverBinding",
    "WalletShell",
    "build_wallet_shell",
    "cleanup_application_resources",
    "connect_popover",
    "insert_account_entry",
    "shutdown_gui",
]
