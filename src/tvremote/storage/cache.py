from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from pydantic import ValidationError

from tvremote.models import DeviceRecord, normalize_mac

logger = logging.getLogger(__name__)

DeviceMap = dict[str, DeviceRecord]


def merge(
    existing: Mapping[str, DeviceRecord], fresh: Iterable[DeviceRecord]
) -> DeviceMap:
    """Overwrite cached entries with freshly discovered ones, keyed by MAC.

    Later records for the same MAC win. ``existing`` is left untouched.
    """
    merged = dict(existing)
    for record in fresh:
        merged[record.mac] = record
    return merged


def values(mapping: Mapping[str, DeviceRecord]) -> list[DeviceRecord]:
    return list(mapping.values())


class DeviceCache:
    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DeviceMap:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            logger.debug("No device cache at %s", self._path)
            return {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable device cache %s: %s", self._path, exc)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring device cache %s: not a JSON object", self._path)
            return {}

        devices: DeviceMap = {}
        for key, entry in data.items():
            try:
                record = DeviceRecord.model_validate(entry)
            except ValidationError as exc:
                logger.debug("Skipping cache entry %s: %s", key, exc)
                continue
            devices[record.mac] = record
        return devices

    def save(self, mapping: Mapping[str, DeviceRecord]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {mac: record.to_json() for mac, record in mapping.items()}
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)

    def forget(self, mac: str) -> bool:
        """Remove a device. Returns True if it was cached."""
        key = normalize_mac(mac)
        devices = self.load()
        if key not in devices:
            return False
        del devices[key]
        self.save(devices)
        return True
