"""Startup wiring for the wallet shell."""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger
from PySide6.QtWidgets import QListWidget, QListWidgetItem, QMainWindow, QPushButton, QWidget

from ..config import DEFAULT_CONFIG, ShellConfig
from ..ui import (
    AccountEntryTemplate,
    AccountList,
    LayoutBuilder,
    LayoutSource,
    MainWindow,
    ReceiveArea,
    ReceiveButton,
    SendArea,
    SendButton,
)
from ..widgets.popover import Popover

__all__ = [
    "PopoverBinding",
    "WalletShell",
    "build_wallet_shell",
    "connect_popover",
    "insert_account_entry",
]


@dataclass(slots=True)
class PopoverBinding:
    """A button that opens a popover when clicked."""

    button: QPushButton
    popover: Popover

    def trigger(self) -> None:
        logger.debug("Opening {} from {}", self.popover.objectName(), self.button.objectName())
        self.popover.set_relative_to(self.button)
        self.popover.popup()


def connect_popover(button: QPushButton, popover: Popover) -> PopoverBinding:
    """Open ``popover`` under ``button`` whenever the button is clicked."""
    binding = PopoverBinding(button=button, popover=popover)
    popover.set_relative_to(button)
    button.clicked.connect(lambda _checked=False: binding.trigger())
    return binding


def insert_account_entry(account_list: QListWidget, entry: QWidget, position: int = -1) -> QListWidgetItem:
    """
    Move ``entry`` out of the layout it was loaded from and show it as a row
    of ``account_list``. A negative ``position`` appends.
    """
    entry.setParent(None)

    item = QListWidgetItem()
    item.setSizeHint(entry.sizeHint())
    if 0 <= position < account_list.count():
        account_list.insertItem(position, item)
    else:
        account_list.addItem(item)
    account_list.setItemWidget(item, entry)
    return item


@dataclass(slots=True)
class WalletShell:
    """Widgets and wiring created at startup."""

    window: QMainWindow
    account_list: QListWidget
    bindings: tuple[PopoverBinding, ...]
    # Builders own the Python side of the loaded trees.
    builders: tuple[LayoutBuilder, ...] = ()
    entries: list[QWidget] = field(default_factory=list)

    def show(self) -> None:
        self.window.show()

    def popovers(self) -> tuple[Popover, ...]:
        return tuple(binding.popover for binding in self.bindings)


def build_wallet_shell(
    app_layout: LayoutSource,
    account_layout: LayoutSource,
    *,
    config: ShellConfig = DEFAULT_CONFIG,
) -> WalletShell:
    """
    Load both layouts, resolve the named widgets and wire them.

    Raises:
        LayoutLoadError: a layout cannot be parsed.
        ResolutionError: a required widget is missing or of the wrong class.
    """
    builder = LayoutBuilder.from_source(app_layout)

    bindings = (
        connect_popover(builder.make_object(SendButton).inner(), builder.make_object(SendArea).inner()),
        connect_popover(builder.make_object(ReceiveButton).inner(), builder.make_object(ReceiveArea).inner()),
    )

    account_list = builder.make_object(AccountList).inner()
    entry_builder = LayoutBuilder.from_source(account_layout)
    entry = entry_builder.make_object(AccountEntryTemplate).inner()
    insert_account_entry(account_list, entry)

    window = builder.make_object(MainWindow).inner()
    window.setWindowTitle(config.window_title)

    logger.info("Wallet shell ready ({} account rows)", account_list.count())
    return WalletShell(
        window=window,
        account_list=account_list,
        bindings=bindings,
        builders=(builder, entry_builder),
        entries=[entry],
    )
