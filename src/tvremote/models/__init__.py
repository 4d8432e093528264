"""Data models for tvremote."""

from tvremote.models.device import UNKNOWN_MAC, DeviceRecord, normalize_mac
from tvremote.models.keys import DIGITS, KeyEvent, KeyPress

__all__ = [
    "DIGITS",
    "DeviceRecord",
    "KeyEvent",
    "KeyPress",
    "UNKNOWN_MAC",
    "normalize_mac",
]
