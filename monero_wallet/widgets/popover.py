"""Transient overlay anchored to a trigger control."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPoint, Qt, Signal
from PySide6.QtWidgets import QFrame, QWidget


class Popover(QFrame):
    """
    Frame shown as a popup window under its anchor widget.

    Declared in layouts as a custom widget extending ``QFrame``. It stays
    hidden until :meth:`popup` is called, and Qt hides it again when the
    user clicks outside of it.
    """

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.Popup)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._relative_to: Optional[QWidget] = None

    def relative_to(self) -> Optional[QWidget]:
        return self._relative_to

    def set_relative_to(self, widget: Optional[QWidget]) -> None:
        """Anchor the popover to ``widget``."""
        self._relative_to = widget

    def popup(self) -> None:
        """Show the popover below its anchor (or where it stands if unanchored)."""
        self.adjustSize()
        anchor = self._relative_to
        if anchor is not None:
            self.move(anchor.mapToGlobal(QPoint(0, anchor.height())))
        self.show()
        self.raise_()

    def popdown(self) -> None:
        self.hide()

    def hideEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().hideEvent(event)
        self.closed.emit()
