from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class KeyEvent(Enum):
    DIGIT_0 = auto()
    DIGIT_1 = auto()
    DIGIT_2 = auto()
    DIGIT_3 = auto()
    DIGIT_4 = auto()
    DIGIT_5 = auto()
    DIGIT_6 = auto()
    DIGIT_7 = auto()
    DIGIT_8 = auto()
    DIGIT_9 = auto()
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    BACK = auto()
    HOME = auto()
    ENTER = auto()
    PLAY = auto()
    VOLUME_UP = auto()
    VOLUME_DOWN = auto()
    CHANNEL_UP = auto()
    CHANNEL_DOWN = auto()
    POWER_OFF_QUIT = auto()
    FORCE_QUIT = auto()


DIGITS: tuple[KeyEvent, ...] = (
    KeyEvent.DIGIT_0,
    KeyEvent.DIGIT_1,
    KeyEvent.DIGIT_2,
    KeyEvent.DIGIT_3,
    KeyEvent.DIGIT_4,
    KeyEvent.DIGIT_5,
    KeyEvent.DIGIT_6,
    KeyEvent.DIGIT_7,
    KeyEvent.DIGIT_8,
    KeyEvent.DIGIT_9,
)


@dataclass(frozen=True)
class KeyPress:
    """One decoded input frame."""

    text: str
    key: KeyEvent | None

    @property
    def hex(self) -> str:
        return ",".join(f"{ord(ch):02x}" for ch in self.text)

    @property
    def digit(self) -> int | None:
        if self.key in DIGITS:
            return DIGITS.index(self.key)
        return None
