from __future__ import annotations

from .cache import DeviceCache, DeviceMap, merge, values

__all__ = ["DeviceCache", "DeviceMap", "merge", "values"]
