from __future__ import annotations

import pytest

from tvremote.config import (
    DiscoveryConfig,
    RemoteConfig,
    Settings,
    get_settings,
    load_settings,
    resolve_config_path,
    write_settings,
)


def test_config_roundtrip(tmp_path):
    path = tmp_path / "config.toml"
    settings = Settings(
        discovery=DiscoveryConfig(window=1.5),
        remote=RemoteConfig(port=8001, name="living-room", token_dir="C:\\tokens"),
    )
    write_settings(settings, path)

    loaded = load_settings(path)
    assert loaded == settings


def test_defaults_follow_cache_env(tmp_path):
    settings = Settings()
    assert settings.discovery.window == 0.25
    assert settings.cache.path == str(
        tmp_path / "cache" / "badisi-samsung-tv-remote-device-cache.json"
    )
    assert settings.remote.port == 8002


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[discovery]\nwindow = 0\n")

    with pytest.raises(ValueError, match="Invalid config file"):
        load_settings(path)


def test_invalid_toml_is_rejected(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[discovery\n")

    with pytest.raises(ValueError, match="Invalid TOML"):
        load_settings(path)


def test_env_var_must_point_to_existing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("TVREMOTE_CONFIG", str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        resolve_config_path()
    path, exists = resolve_config_path(allow_missing=True)
    assert path == tmp_path / "missing.toml"
    assert exists is False


def test_get_settings_reads_env_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text("[discovery]\nwindow = 2.0\n")
    monkeypatch.setenv("TVREMOTE_CONFIG", str(path))
    get_settings.cache_clear()

    assert get_settings().discovery.window == 2.0
