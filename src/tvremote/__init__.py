"""tvremote - find Samsung TVs on the local network and drive them from a terminal."""

from __future__ import annotations

from importlib.metadata import version

from .config import Settings, get_settings
from .models import DeviceRecord, KeyEvent, KeyPress
from .storage import DeviceCache

__all__ = [
    "DeviceCache",
    "DeviceRecord",
    "KeyEvent",
    "KeyPress",
    "Settings",
    "__version__",
    "get_settings",
]

__version__ = version("tvremote")
