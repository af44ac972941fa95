"""Layout sources shipped with the package."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

from ..errors import LayoutLoadError

APP_LAYOUT = "app.ui"
ACCOUNT_ACTIONS_LAYOUT = "account_actions.ui"

_LAYOUT_PACKAGE = "monero_wallet.ui.layouts"


@dataclass(frozen=True)
class LayoutSource:
    """Declarative layout text plus the name it was loaded under."""

    name: str
    text: str

    @classmethod
    def from_path(cls, path: Path) -> "LayoutSource":
        try:
            return cls(name=path.name, text=path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise LayoutLoadError(str(path), exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise LayoutLoadError(str(path), f"not UTF-8 text ({exc.reason})") from exc


def load_layout_source(name: str, *, directory: Optional[Path] = None) -> LayoutSource:
    """
    Read layout ``name`` from ``directory`` or, by default, from the
    packaged ``layouts`` directory.
    """
    if directory is not None:
        return LayoutSource.from_path(directory / name)

    resource = resources.files(_LAYOUT_PACKAGE).joinpath(name)
    if not resource.is_file():
        raise LayoutLoadError(name, "no such packaged layout")
    try:
        text = resource.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LayoutLoadError(name, f"not UTF-8 text ({exc.reason})") from exc
    return LayoutSource(name=name, text=text)
