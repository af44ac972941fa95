"""Custom widgets available to the ``.ui`` layouts."""

from .popover import Popover

# Classes QUiLoader must know about to instantiate custom <class> entries.
CUSTOM_WIDGETS = (Popover,)

__all__ = ["CUSTOM_WIDGETS", "Popover"]
