"""Error taxonomy for the wallet shell startup path."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for fatal wallet shell errors."""


class LayoutLoadError(ShellError):
    """Raised when a layout source cannot be read or parsed."""

    def __init__(self, source: str, detail: str) -> None:
        super().__init__(f"Cannot load layout {source!r}: {detail}")
        self.source = source
        self.detail = detail


class ResolutionError(ShellError):
    """
    Raised when a named widget cannot be resolved from a layout.

    ``reason`` is ``"missing"`` when no object carries the identifier and
    ``"kind"`` when the object exists but is not of the expected class.
    """

    MISSING = "missing"
    KIND = "kind"

    def __init__(
        self,
        widget_id: str,
        expected_kind: type,
        *,
        actual_kind: type | None = None,
    ) -> None:
        self.widget_id = widget_id
        self.expected_kind = expected_kind
        self.actual_kind = actual_kind
        self.reason = self.MISSING if actual_kind is None else self.KIND
        if actual_kind is None:
            message = f"Widget {widget_id!r} not found in layout (expected {expected_kind.__name__})"
        else:
            message = (
                f"Widget {widget_id!r} is a {actual_kind.__name__}, "
                f"expected {expected_kind.__name__}"
            )
        super().__init__(message)


class StartupError(ShellError):
    """Raised for any other unrecoverable startup condition."""
