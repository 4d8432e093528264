from __future__ import annotations

import json
from pathlib import Path

import pytest

from tvremote.config import default_cache_path
from tvremote.models import UNKNOWN_MAC, DeviceRecord
from tvremote.storage import DeviceCache, merge, values


def _record(mac: str, ip: str, name: str | None = None) -> DeviceRecord:
    return DeviceRecord(friendly_name=name or ip, ip=ip, mac=mac)


def test_load_missing_file_is_empty(tmp_path):
    cache = DeviceCache(tmp_path / "missing.json")
    assert cache.load() == {}


@pytest.mark.parametrize("content", ["not-json{", "[1, 2, 3]", '"text"', ""])
def test_load_corrupt_file_is_empty(tmp_path, content):
    path = tmp_path / "cache.json"
    path.write_text(content)
    assert DeviceCache(path).load() == {}


def test_load_skips_invalid_entries(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(
        json.dumps(
            {
                "AA:BB:CC:DD:EE:FF": {
                    "friendlyName": "Living Room",
                    "ip": "192.168.1.20",
                    "mac": "AA:BB:CC:DD:EE:FF",
                },
                "broken": {"mac": "11:22:33:44:55:66"},
                "other": 42,
            }
        )
    )

    devices = DeviceCache(path).load()

    assert list(devices) == ["AA:BB:CC:DD:EE:FF"]
    assert devices["AA:BB:CC:DD:EE:FF"].friendly_name == "Living Room"


def test_save_roundtrip_uses_original_field_names(tmp_path):
    path = tmp_path / "nested" / "cache.json"
    cache = DeviceCache(path)
    mapping = {"AA:BB:CC:DD:EE:FF": _record("AA:BB:CC:DD:EE:FF", "10.0.0.5", "TV")}

    cache.save(mapping)

    raw = json.loads(path.read_text())
    assert raw == {
        "AA:BB:CC:DD:EE:FF": {
            "friendlyName": "TV",
            "ip": "10.0.0.5",
            "mac": "AA:BB:CC:DD:EE:FF",
        }
    }
    assert cache.load() == mapping


def test_merge_overwrites_whole_record():
    existing = {"AA:BB:CC:DD:EE:FF": _record("AA:BB:CC:DD:EE:FF", "1", "Old name")}
    fresh = [_record("AA:BB:CC:DD:EE:FF", "2")]

    merged = merge(existing, fresh)

    assert merged == {"AA:BB:CC:DD:EE:FF": _record("AA:BB:CC:DD:EE:FF", "2")}
    assert merged["AA:BB:CC:DD:EE:FF"].friendly_name == "2"
    assert existing["AA:BB:CC:DD:EE:FF"].ip == "1"


def test_merge_is_idempotent():
    existing = {"11:22:33:44:55:66": _record("11:22:33:44:55:66", "10.0.0.9")}
    fresh = [
        _record("AA:BB:CC:DD:EE:FF", "10.0.0.1"),
        _record("AA:BB:CC:DD:EE:01", "10.0.0.2"),
    ]

    once = merge(existing, fresh)
    twice = merge(once, fresh)

    assert once == twice
    assert len(twice) == 3


def test_merge_later_duplicate_wins():
    fresh = [
        _record("AA:BB:CC:DD:EE:FF", "10.0.0.1"),
        _record("aa-bb-cc-dd-ee-ff", "10.0.0.7"),
    ]

    merged = merge({}, fresh)

    assert [device.ip for device in values(merged)] == ["10.0.0.7"]


def test_unknown_macs_collapse_to_one_entry():
    fresh = [_record("", "10.0.0.1"), _record("garbage", "10.0.0.2")]

    merged = merge({}, fresh)

    assert list(merged) == [UNKNOWN_MAC]
    assert merged[UNKNOWN_MAC].ip == "10.0.0.2"


def test_forget(tmp_path):
    cache = DeviceCache(tmp_path / "cache.json")
    cache.save({"AA:BB:CC:DD:EE:FF": _record("AA:BB:CC:DD:EE:FF", "10.0.0.1")})

    assert cache.forget("aa:bb:cc:dd:ee:ff") is True
    assert cache.load() == {}
    assert cache.forget("AA:BB:CC:DD:EE:FF") is False


def test_default_cache_path_per_platform(monkeypatch, tmp_path):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    name = "badisi-samsung-tv-remote-device-cache.json"

    assert default_cache_path("darwin") == tmp_path / "Library" / "Caches" / name

    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "local"))
    assert default_cache_path("win32") == tmp_path / "local" / name
    monkeypatch.delenv("LOCALAPPDATA")
    assert default_cache_path("win32") == tmp_path / "AppData" / "Local" / name

    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg"))
    assert default_cache_path("linux") == tmp_path / "xdg" / name
    monkeypatch.delenv("XDG_CACHE_HOME")
    assert default_cache_path("linux") == tmp_path / ".cache" / name
