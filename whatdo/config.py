"""
WHATDO - Settings
=================
Environment-driven settings with the WHATDO_ prefix:

    WHATDO_LIST_PATH   list file location (default: ~/.config/whatdo/list.toml)
    WHATDO_LOG_LEVEL   logging level name (default: WARNING)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "WHATDO"
APP_DIR = "whatdo"
LIST_FILE = "list.toml"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def config_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Base config directory (XDG_CONFIG_HOME, else ~/.config)"""
    environ = os.environ if environ is None else environ
    xdg = environ.get("XDG_CONFIG_HOME", "").strip()
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


def default_list_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Should be something like ~/.config/whatdo/list.toml"""
    return config_dir(environ) / APP_DIR / LIST_FILE


@dataclass(frozen=True)
class Settings:
    list_path: Path
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "Settings":
        environ = os.environ if environ is None else environ

        raw_path = environ.get(_k("LIST_PATH"), "").strip()
        list_path = Path(raw_path).expanduser() if raw_path else default_list_path(environ)

        log_level = environ.get(_k("LOG_LEVEL"), "").strip().upper() or "WARNING"

        return Settings(list_path=list_path, log_level=log_level)
