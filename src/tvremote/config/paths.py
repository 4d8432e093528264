from __future__ import annotations

import os
import sys
from pathlib import Path

import platformdirs

APP_NAME = "tvremote"
CONFIG_FILENAME = "config.toml"
CACHE_FILENAME = "badisi-samsung-tv-remote-device-cache.json"
TOKEN_DIRNAME = "tvremote-tokens"


def default_cache_dir(platform: str | None = None) -> Path:
    platform = platform or sys.platform
    home = Path.home()
    if platform == "darwin":
        return home / "Library" / "Caches"
    if platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA") or home / "AppData" / "Local")
    return Path(os.environ.get("XDG_CACHE_HOME") or home / ".cache")


def default_cache_path(platform: str | None = None) -> Path:
    return default_cache_dir(platform) / CACHE_FILENAME


def default_token_dir() -> Path:
    return default_cache_dir() / TOKEN_DIRNAME


def default_config_path() -> Path:
    return platformdirs.user_config_path(APP_NAME) / CONFIG_FILENAME


def expand_path(value: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(value)))
