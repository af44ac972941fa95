"""Environment-driven settings for the wallet shell."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_APP_ID = "com.github.vorot93.monero"
DEFAULT_APP_NAME = "Monero Wallet"

_LOG_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def parse_log_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Translate a level name such as ``"debug"`` into a ``logging`` level."""
    if value is None or not value.strip():
        return default
    level = _LOG_LEVELS.get(value.strip().lower())
    if level is None:
        logger.warning("Unknown log level %r, using %s", value, logging.getLevelName(default))
        return default
    return level


def _read_env_path(env: Mapping[str, str], name: str) -> Optional[Path]:
    value = env.get(name)
    if value is None or not value.strip():
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class ShellConfig:
    """Settings read once at startup."""

    app_id: str = DEFAULT_APP_ID
    app_name: str = DEFAULT_APP_NAME
    window_title: str = DEFAULT_APP_NAME
    log_level: int = logging.INFO
    # Rotating file logging is enabled only when a directory is given.
    log_dir: Optional[Path] = None
    # Overrides the packaged layouts, handy for trying hand-edited .ui files.
    layout_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """Build a configuration from ``MONERO_WALLET_*`` environment variables."""
        env = os.environ if env is None else env
        app_name = env.get("MONERO_WALLET_APP_NAME", DEFAULT_APP_NAME)
        return cls(
            app_id=env.get("MONERO_WALLET_APP_ID", DEFAULT_APP_ID),
            app_name=app_name,
            window_title=env.get("MONERO_WALLET_TITLE", app_name),
            log_level=parse_log_level(env.get("MONERO_WALLET_LOG")),
            log_dir=_read_env_path(env, "MONERO_WALLET_LOG_DIR"),
            layout_dir=_read_env_path(env, "MONERO_WALLET_LAYOUT_DIR"),
        )

    @property
    def organization_domain(self) -> str:
        """Reverse of the application id prefix, e.g. ``vorot93.github.com``."""
        parts = self.app_id.split(".")[:-1]
        return ".".join(reversed(parts))

    @property
    def desktop_file_name(self) -> str:
        return self.app_id


DEFAULT_CONFIG = ShellConfig.from_env()
