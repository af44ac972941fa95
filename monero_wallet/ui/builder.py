"""Qt Designer layout loading."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TypeVar

from loguru import logger
from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QObject
from PySide6.QtUiTools import QUiLoader
from PySide6.QtWidgets import QApplication, QWidget

from ..errors import LayoutLoadError, StartupError
from ..widgets import CUSTOM_WIDGETS
from .registry import WidgetHandle, resolve

if TYPE_CHECKING:
    from .resources import LayoutSource

H = TypeVar("H", bound="WidgetHandle")

# Python wrappers of loaded layout roots. Dropping the last wrapper of a
# parentless root deletes its C++ tree, so roots stay here until Qt destroys
# them or release_layouts() is called at shutdown.
_LIVE_ROOTS: dict[int, QWidget] = {}


def _keep_alive(root: QWidget) -> None:
    key = id(root)
    _LIVE_ROOTS[key] = root
    root.destroyed.connect(lambda *_: _LIVE_ROOTS.pop(key, None))


def release_layouts() -> int:
    """Drop the references held on loaded layout roots; returns how many."""
    count = len(_LIVE_ROOTS)
    _LIVE_ROOTS.clear()
    return count


def _create_loader() -> QUiLoader:
    loader = QUiLoader()
    for widget_class in CUSTOM_WIDGETS:
        loader.registerCustomWidget(widget_class)
    return loader


class LayoutBuilder:
    """
    Widget tree parsed from one ``.ui`` document.

    The builder keeps the root widget alive; objects inside it are looked up
    by ``objectName``.
    """

    def __init__(self, root: QWidget, *, name: str = "<string>"):
        self._root = root
        self.name = name

    @classmethod
    def from_string(cls, text: str, *, name: str = "<string>", parent: Optional[QWidget] = None) -> "LayoutBuilder":
        """Parse layout XML. A running ``QApplication`` is required."""
        if QApplication.instance() is None:
            raise StartupError("A QApplication must exist before layouts are loaded")

        buffer = QBuffer()
        buffer.setData(QByteArray(text.encode("utf-8")))
        if not buffer.open(QIODevice.OpenModeFlag.ReadOnly):
            raise LayoutLoadError(name, "cannot open layout buffer")

        loader = _create_loader()
        try:
            root = loader.load(buffer, parent)
        except RuntimeError as exc:
            # PySide6 raises instead of returning None on unreadable XML.
            raise LayoutLoadError(name, loader.errorString() or str(exc)) from exc
        finally:
            buffer.close()

        if root is None:
            raise LayoutLoadError(name, loader.errorString() or "loader returned no widget")

        if parent is None:
            _keep_alive(root)
        logger.debug("Loaded layout {} with root {!r}", name, root.objectName())
        return cls(root, name=name)

    @classmethod
    def from_source(cls, source: "LayoutSource", *, parent: Optional[QWidget] = None) -> "LayoutBuilder":
        return cls.from_string(source.text, name=source.name, parent=parent)

    @property
    def root(self) -> QWidget:
        return self._root

    def get_object(self, widget_id: str) -> Optional[QObject]:
        """Return the object named ``widget_id`` or ``None``."""
        if self._root.objectName() == widget_id:
            return self._root
        return self._root.findChild(QObject, widget_id)

    def object_ids(self) -> list[str]:
        """Identifiers of every named object in the tree, Qt internals excluded."""
        names = {self._root.objectName()}
        names.update(child.objectName() for child in self._root.findChildren(QObject))
        return sorted(name for name in names if name and not name.startswith("qt_"))

    def make_object(self, handle_type: type[H]) -> H:
        """Resolve ``handle_type`` against this builder."""
        return resolve(handle_type, self)

    def __repr__(self) -> str:
        return f"LayoutBuilder(name={self.name!r}, root={self._root.objectName()!r})"
