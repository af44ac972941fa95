"""Layout loading and typed widget lookup."""

from .builder import LayoutBuilder, release_layouts
from .registry import (
    WidgetHandle,
    lookup_handle,
    register_handle,
    registered_handles,
    resolve,
    resolve_all,
)
from .resources import ACCOUNT_ACTIONS_LAYOUT, APP_LAYOUT, LayoutSource, load_layout_source
from .widgets import (
    ACCOUNT_ACTIONS_WIDGETS,
    APP_WIDGETS,
    AccountEntryTemplate,
    AccountList,
    MainWindow,
    ReceiveArea,
    ReceiveButton,
    SendArea,
    SendButton,
)

__all__ = [
    "ACCOUNT_ACTIONS_LAYOUT",
    "ACCOUNT_ACTIONS_WIDGETS",
    "APP_LAYOUT",
    "APP_WIDGETS",
    "AccountEntryTemplate",
    "AccountList",
    "LayoutBuilder",
    "LayoutSource",
    "MainWindow",
    "ReceiveArea",
    "ReceiveButton",
    "SendArea",
    "SendButton",
    "WidgetHandle",
    "load_layout_source",
    "lookup_handle",
    "register_handle",
    "registered_handles",
    "release_layouts",
    "resolve",
    "resolve_all",
]
