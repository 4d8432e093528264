"""Raw terminal input decoding.

Each key press is read as a single frame of at most ``FRAME_SIZE`` bytes.
Arrow keys arrive as three-byte escape sequences while everything else is a
single byte, so a short read is always a complete frame: no bytes are carried
over between reads.
"""

from __future__ import annotations

from collections.abc import Callable

from tvremote.models import DIGITS, KeyEvent, KeyPress

FRAME_SIZE = 3

ESC = "\x1b"
ETX = "\x03"
DEL = "\x7f"

KEY_TABLE: dict[str, KeyEvent] = {
    **{str(n): key for n, key in enumerate(DIGITS)},
    f"{ESC}[A": KeyEvent.UP,
    f"{ESC}[B": KeyEvent.DOWN,
    f"{ESC}[C": KeyEvent.RIGHT,
    f"{ESC}[D": KeyEvent.LEFT,
    DEL: KeyEvent.BACK,
    ESC: KeyEvent.HOME,
    "\r": KeyEvent.ENTER,
    "p": KeyEvent.PLAY,
    "+": KeyEvent.VOLUME_UP,
    "-": KeyEvent.VOLUME_DOWN,
    "w": KeyEvent.CHANNEL_UP,
    "s": KeyEvent.CHANNEL_DOWN,
    "q": KeyEvent.POWER_OFF_QUIT,
    ETX: KeyEvent.FORCE_QUIT,
    "f": KeyEvent.FORCE_QUIT,
}


def decode(data: bytes) -> KeyPress:
    text = data.decode("utf-8", errors="replace").replace("\x00", "")
    return KeyPress(text=text, key=KEY_TABLE.get(text))


def read_key(read: Callable[[int], bytes]) -> KeyPress:
    """Read and decode one frame. Raises EOFError when input is exhausted."""
    data = read(FRAME_SIZE)
    if not data:
        raise EOFError("terminal input closed")
    return decode(data)
