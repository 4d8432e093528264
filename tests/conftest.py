from __future__ import annotations

import pytest

from tvremote.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("TVREMOTE_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
