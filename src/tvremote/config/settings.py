from __future__ import annotations

import json
import os
import tomllib
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .paths import (
    default_cache_path,
    default_config_path,
    default_token_dir,
    expand_path,
)

CONFIG_ENV_VAR = "TVREMOTE_CONFIG"


class DiscoveryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    window: float = Field(default=0.25, gt=0)
    resolve_timeout: float = Field(default=5.0, gt=0)


class CacheConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    path: str = Field(default_factory=lambda: str(default_cache_path()))


class RemoteConfig(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    port: int = Field(default=8002, ge=1, le=65535)
    name: str = "tvremote"
    timeout: float = Field(default=5.0, gt=0)
    key_press_delay: float = Field(default=0.1, ge=0)
    token_dir: str = Field(default_factory=lambda: str(default_token_dir()))


class Settings(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    remote: RemoteConfig = Field(default_factory=RemoteConfig)


def resolve_config_path(allow_missing: bool = False) -> tuple[Path, bool]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = expand_path(env_path)
        if not allow_missing and not path.exists():
            raise FileNotFoundError(f"{CONFIG_ENV_VAR} points to missing file: {path}")
        return path, path.exists()

    path = default_config_path()
    return path, path.exists()


def load_settings(path: Path) -> Settings:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in config file: {path}\n{exc}") from exc

    try:
        return Settings.model_validate(data or {})
    except ValidationError as exc:
        raise ValueError(f"Invalid config file: {path}\n{exc}") from exc


@lru_cache
def get_settings() -> Settings:
    path, exists = resolve_config_path(allow_missing=False)
    if exists:
        return load_settings(path)
    return Settings()


def cache_path_from_settings(settings: Settings) -> Path:
    return expand_path(settings.cache.path)


def token_dir_from_settings(settings: Settings) -> Path:
    return expand_path(settings.remote.token_dir)


def _toml_string(value: str) -> str:
    return json.dumps(value)


def render_settings_toml(settings: Settings) -> str:
    discovery = settings.discovery
    remote = settings.remote
    lines = [
        "# tvremote configuration",
        "",
        "[discovery]",
        f"window = {discovery.window}",
        f"resolve_timeout = {discovery.resolve_timeout}",
        "",
        "[cache]",
        f"path = {_toml_string(settings.cache.path)}",
        "",
        "[remote]",
        f"port = {remote.port}",
        f"name = {_toml_string(remote.name)}",
        f"timeout = {remote.timeout}",
        f"key_press_delay = {remote.key_press_delay}",
        f"token_dir = {_toml_string(remote.token_dir)}",
        "",
    ]
    return "\n".join(lines)


def write_settings(settings: Settings, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_settings_toml(settings))
