from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from tvremote.models import DeviceRecord, KeyEvent, KeyPress

from .decoder import ETX, read_key
from .remote import RemoteClient, RemoteError

logger = logging.getLogger(__name__)

REMOTE_KEYS: dict[KeyEvent, str] = {
    KeyEvent.DIGIT_0: "KEY_0",
    KeyEvent.DIGIT_1: "KEY_1",
    KeyEvent.DIGIT_2: "KEY_2",
    KeyEvent.DIGIT_3: "KEY_3",
    KeyEvent.DIGIT_4: "KEY_4",
    KeyEvent.DIGIT_5: "KEY_5",
    KeyEvent.DIGIT_6: "KEY_6",
    KeyEvent.DIGIT_7: "KEY_7",
    KeyEvent.DIGIT_8: "KEY_8",
    KeyEvent.DIGIT_9: "KEY_9",
    KeyEvent.UP: "KEY_UP",
    KeyEvent.DOWN: "KEY_DOWN",
    KeyEvent.RIGHT: "KEY_RIGHT",
    KeyEvent.LEFT: "KEY_LEFT",
    KeyEvent.BACK: "KEY_BACK_MHP",
    KeyEvent.HOME: "KEY_HOME",
    KeyEvent.ENTER: "KEY_ENTER",
    KeyEvent.PLAY: "KEY_PLAY",
    KeyEvent.VOLUME_UP: "KEY_VOLUP",
    KeyEvent.VOLUME_DOWN: "KEY_VOLDOWN",
    KeyEvent.CHANNEL_UP: "KEY_CHUP",
    KeyEvent.CHANNEL_DOWN: "KEY_CHDOWN",
}

POWER_KEY = "KEY_POWER"

HELP_TEXT = (
    "Press any key: q-Shutdown and Quit, f-Force Quit, w/s-Channel, "
    "+/- -> Volume, p-Play, Arrows, ENTER, ESC, BACKSPACE"
)


class SelectionCancelled(Exception):
    """The user quit while choosing a device."""


def select_device(
    devices: Sequence[DeviceRecord],
    read: Callable[[int], bytes],
    console: Console | None = None,
) -> DeviceRecord:
    """Pick a device, prompting for an index when there is more than one."""
    if not devices:
        raise ValueError("no devices to select from")
    if len(devices) == 1:
        return devices[0]

    console = console or Console()
    console.print("Select device:")
    for index, device in enumerate(devices):
        console.print(f" {index}: {escape(device.describe())}", highlight=False)
    console.print("Waiting for key, q to quit...")

    while True:
        try:
            press = read_key(read)
        except EOFError:
            raise SelectionCancelled() from None
        if press.text in ("q", ETX):
            raise SelectionCancelled()
        index = press.digit
        if index is not None and index < len(devices):
            return devices[index]


class ControlSession:
    """Interactive loop forwarding decoded key presses to a TV."""

    def __init__(
        self,
        device: DeviceRecord,
        remote: RemoteClient,
        read: Callable[[int], bytes],
        console: Console | None = None,
    ) -> None:
        self.device = device
        self.remote = remote
        self._read = read
        self._console = console or Console()

    def run(self) -> KeyEvent:
        """Block until a quit key is pressed; returns the key that ended it."""
        self._call(self.remote.wake)
        self._console.print(HELP_TEXT)

        while True:
            try:
                press = read_key(self._read)
            except EOFError:
                logger.info("Input closed, leaving session")
                return KeyEvent.FORCE_QUIT

            logger.info("Pressed: %r, %s", press.text, press.hex)
            ended_by = self.dispatch(press)
            if ended_by is not None:
                return ended_by

    def dispatch(self, press: KeyPress) -> KeyEvent | None:
        """Send the command for ``press``.

        Returns the quit key when ``press`` ends the session, otherwise None.
        """
        if press.key is KeyEvent.FORCE_QUIT:
            self._console.print("Force Exiting...")
            return press.key
        if press.key is KeyEvent.POWER_OFF_QUIT:
            self._call(self.remote.send_keys, [POWER_KEY])
            self._console.print("Exiting...")
            return press.key

        code = REMOTE_KEYS.get(press.key) if press.key is not None else None
        if code is not None:
            self._call(self.remote.send_key, code)
        return None

    def _call(self, command: Callable[..., None], *args: object) -> None:
        try:
            command(*args)
        except RemoteError as exc:
            logger.warning("%s", exc)
