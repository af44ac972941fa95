"""
Typed widget registry
=====================

Each widget the code talks to is declared once as a handle class::

    class SendButton(WidgetHandle[QPushButton], kind=QPushButton):
        pass

The class name doubles as the ``objectName`` looked up in the layout unless
``widget_id=`` is given. Declaring a handle registers it, so the registry is
a plain ``identifier -> handle class`` table built at import time.

Resolution happens once at startup. A missing identifier or an object of the
wrong class raises :class:`ResolutionError`, which the entry point treats as
fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, Iterable, Optional, TypeVar

from PySide6.QtCore import QObject

from ..errors import ResolutionError

if TYPE_CHECKING:
    from .builder import LayoutBuilder

W = TypeVar("W", bound=QObject)
H = TypeVar("H", bound="WidgetHandle")

_REGISTRY: dict[str, type["WidgetHandle"]] = {}


class WidgetHandle(Generic[W]):
    """Typed wrapper around a widget resolved from a layout."""

    widget_id: ClassVar[str]
    kind: ClassVar[type[QObject]]

    def __init_subclass__(
        cls,
        *,
        kind: Optional[type[QObject]] = None,
        widget_id: Optional[str] = None,
        register: bool = True,
        **kwargs,
    ):
        super().__init_subclass__(**kwargs)
        if kind is None:
            # Intermediate base without a concrete widget class.
            return
        cls.kind = kind
        cls.widget_id = widget_id or cls.__name__
        if register:
            register_handle(cls)

    def __init__(self, widget: W, *, owner: Optional["LayoutBuilder"] = None):
        if not isinstance(widget, self.kind):
            raise TypeError(
                f"{type(self).__name__} wraps {self.kind.__name__}, got {type(widget).__name__}"
            )
        self.widget = widget
        # Builder the widget came from; keeps its layout tree reachable.
        self.owner = owner

    def inner(self) -> W:
        return self.widget

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.widget is other.widget  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), id(self.widget)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.widget_id!r}, {type(self.widget).__name__})"


def register_handle(handle_type: type[H]) -> type[H]:
    """Add ``handle_type`` to the registry; identifiers must be unique."""
    existing = _REGISTRY.get(handle_type.widget_id)
    if existing is not None and existing is not handle_type:
        raise ValueError(
            f"Widget id {handle_type.widget_id!r} already declared by "
            f"{existing.__module__}.{existing.__qualname__}"
        )
    _REGISTRY[handle_type.widget_id] = handle_type
    return handle_type


def unregister_handle(widget_id: str) -> None:
    """Remove the handle declared for ``widget_id``, if any."""
    _REGISTRY.pop(widget_id, None)


def registered_handles() -> dict[str, type[WidgetHandle]]:
    """Copy of the ``identifier -> handle class`` table."""
    return dict(_REGISTRY)


def lookup_handle(widget_id: str) -> type[WidgetHandle]:
    try:
        return _REGISTRY[widget_id]
    except KeyError:
        raise KeyError(f"No widget handle declared for {widget_id!r}") from None


def resolve(handle_type: type[H], builder: "LayoutBuilder") -> H:
    """
    Look up ``handle_type.widget_id`` in ``builder`` and wrap the result.

    Raises:
        ResolutionError: the identifier is absent or names an object that is
            not a ``handle_type.kind``.
    """
    widget_id = handle_type.widget_id
    obj = builder.get_object(widget_id)
    if obj is None:
        raise ResolutionError(widget_id, handle_type.kind)
    if not isinstance(obj, handle_type.kind):
        raise ResolutionError(widget_id, handle_type.kind, actual_kind=type(obj))
    return handle_type(obj, owner=builder)


def resolve_all(builder: "LayoutBuilder", handle_types: Iterable[type[WidgetHandle]]) -> dict[type[WidgetHandle], WidgetHandle]:
    """Resolve several handles in order; the first failure propagates."""
    return {handle_type: resolve(handle_type, builder) for handle_type in handle_types}
