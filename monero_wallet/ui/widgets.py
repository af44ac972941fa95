"""Widgets the shell resolves from its layouts."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QListWidget, QMainWindow, QPushButton

from ..widgets.popover import Popover
from .registry import WidgetHandle


class MainWindow(WidgetHandle[QMainWindow], kind=QMainWindow):
    pass


class SendArea(WidgetHandle[Popover], kind=Popover):
    pass


class ReceiveArea(WidgetHandle[Popover], kind=Popover):
    pass


class SendButton(WidgetHandle[QPushButton], kind=QPushButton):
    pass


class ReceiveButton(WidgetHandle[QPushButton], kind=QPushButton):
    pass


class AccountList(WidgetHandle[QListWidget], kind=QListWidget):
    pass


# Lives in account_actions.ui, one copy per account row.
class AccountEntryTemplate(WidgetHandle[QFrame], kind=QFrame):
    pass


APP_WIDGETS = (MainWindow, SendArea, ReceiveArea, SendButton, ReceiveButton, AccountList)
ACCOUNT_ACTIONS_WIDGETS = (AccountEntryTemplate,)
