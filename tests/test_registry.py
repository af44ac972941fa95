from __future__ import annotations

import gc

import pytest
from PySide6.QtWidgets import QLabel, QPushButton

from monero_wallet.errors import ResolutionError
from monero_wallet.ui import (
    ACCOUNT_ACTIONS_WIDGETS,
    APP_WIDGETS,
    AccountList,
    LayoutBuilder,
    ReceiveButton,
    SendArea,
    SendButton,
    WidgetHandle,
    lookup_handle,
    registered_handles,
    resolve,
    resolve_all,
)
from monero_wallet.ui.registry import unregister_handle
from monero_wallet.widgets import Popover
from tests._layouts import SEND_ONLY_UI, widget_xml, window_ui


def test_declared_handles_are_registered_under_their_class_name() -> None:
    table = registered_handles()
    for handle_type in APP_WIDGETS + ACCOUNT_ACTIONS_WIDGETS:
        assert handle_type.widget_id == handle_type.__name__
        assert table[handle_type.widget_id] is handle_type


def test_lookup_handle() -> None:
    assert lookup_handle("SendButton") is SendButton
    with pytest.raises(KeyError):
        lookup_handle("NoSuchWidget")


def test_resolve_every_app_widget(qapp, app_layout) -> None:
    builder = LayoutBuilder.from_source(app_layout)
    handles = resolve_all(builder, APP_WIDGETS)

    assert list(handles) == list(APP_WIDGETS)
    for handle_type, handle in handles.items():
        assert isinstance(handle, handle_type)
        assert handle.widget_id == handle_type.widget_id
        assert handle.inner().objectName() == handle_type.widget_id
        assert isinstance(handle.inner(), handle_type.kind)


def test_resolved_popover_keeps_its_python_class(qapp, app_layout) -> None:
    builder = LayoutBuilder.from_source(app_layout)
    assert isinstance(resolve(SendArea, builder).inner(), Popover)


def test_missing_identifier_names_the_widget(qapp) -> None:
    builder = LayoutBuilder.from_string(SEND_ONLY_UI)

    with pytest.raises(ResolutionError) as excinfo:
        resolve(ReceiveButton, builder)

    error = excinfo.value
    assert error.widget_id == "ReceiveButton"
    assert error.reason == ResolutionError.MISSING
    assert error.actual_kind is None
    assert "ReceiveButton" in str(error)


def test_wrong_kind_is_a_resolution_failure(qapp) -> None:
    builder = LayoutBuilder.from_string(window_ui(widget_xml("QLabel", "SendButton")))

    with pytest.raises(ResolutionError) as excinfo:
        builder.make_object(SendButton)

    error = excinfo.value
    assert error.reason == ResolutionError.KIND
    assert error.expected_kind is QPushButton
    assert error.actual_kind is QLabel
    assert "SendButton" in str(error)
    assert "QLabel" in str(error)


def test_resolve_all_stops_at_first_failure(qapp) -> None:
    builder = LayoutBuilder.from_string(SEND_ONLY_UI)
    with pytest.raises(ResolutionError) as excinfo:
        resolve_all(builder, APP_WIDGETS)
    assert excinfo.value.widget_id == "ReceiveArea"


def test_resolve_leaves_builder_untouched(qapp, app_layout) -> None:
    builder = LayoutBuilder.from_source(app_layout)
    before = builder.object_ids()

    class Missing(WidgetHandle[QLabel], kind=QLabel, register=False):
        pass

    resolve(SendButton, builder)
    with pytest.raises(ResolutionError):
        resolve(Missing, builder)
    assert builder.object_ids() == before


def test_duplicate_identifier_is_rejected() -> None:
    with pytest.raises(ValueError, match="SendButton"):

        class OtherSendButton(WidgetHandle[QPushButton], kind=QPushButton, widget_id="SendButton"):
            pass

    assert lookup_handle("SendButton") is SendButton


def test_explicit_identifier_and_unregistered_handle(qapp) -> None:
    class Caption(WidgetHandle[QLabel], kind=QLabel, widget_id="captionLabel", register=False):
        pass

    assert Caption.widget_id == "captionLabel"
    assert "captionLabel" not in registered_handles()

    builder = LayoutBuilder.from_string(window_ui(widget_xml("QLabel", "captionLabel")))
    assert resolve(Caption, builder).inner().objectName() == "captionLabel"


def test_registered_handle_can_be_removed() -> None:
    class ScratchLabel(WidgetHandle[QLabel], kind=QLabel):
        pass

    try:
        assert lookup_handle("ScratchLabel") is ScratchLabel
    finally:
        unregister_handle("ScratchLabel")
    assert "ScratchLabel" not in registered_handles()


def test_handle_rejects_widget_of_other_class(qapp) -> None:
    with pytest.raises(TypeError):
        SendButton(QLabel())


def test_handles_compare_by_wrapped_widget(qapp) -> None:
    button = QPushButton()
    assert SendButton(button) == SendButton(button)
    assert SendButton(button) != ReceiveButton(button)
    assert SendButton(button) != SendButton(QPushButton())
    assert hash(SendButton(button)) == hash(SendButton(button))


def test_resolved_widget_outlives_its_builder(qapp) -> None:
    account_list = LayoutBuilder.from_string(SEND_ONLY_UI).make_object(AccountList).inner()
    gc.collect()

    assert account_list.count() == 0
    assert account_list.objectName() == "AccountList"


def test_handle_keeps_its_builder(qapp) -> None:
    builder = LayoutBuilder.from_string(SEND_ONLY_UI)
    handle = resolve(SendButton, builder)
    assert handle.owner is builder
    assert SendButton(handle.inner()).owner is None
