from __future__ import annotations

from .paths import (
    APP_NAME,
    CACHE_FILENAME,
    CONFIG_FILENAME,
    default_cache_dir,
    default_cache_path,
    default_config_path,
    expand_path,
)
from .settings import (
    CONFIG_ENV_VAR,
    CacheConfig,
    DiscoveryConfig,
    RemoteConfig,
    Settings,
    cache_path_from_settings,
    get_settings,
    load_settings,
    render_settings_toml,
    resolve_config_path,
    token_dir_from_settings,
    write_settings,
)

__all__ = [
    "APP_NAME",
    "CACHE_FILENAME",
    "CONFIG_ENV_VAR",
    "CONFIG_FILENAME",
    "CacheConfig",
    "DiscoveryConfig",
    "RemoteConfig",
    "Settings",
    "cache_path_from_settings",
    "default_cache_dir",
    "default_cache_path",
    "default_config_path",
    "expand_path",
    "get_settings",
    "load_settings",
    "render_settings_toml",
    "resolve_config_path",
    "token_dir_from_settings",
    "write_settings",
]
