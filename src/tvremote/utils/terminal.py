from __future__ import annotations

import functools
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import IO, Any


class TerminalError(RuntimeError):
    """Raw keyboard input is not available."""


@contextmanager
def raw_terminal(stream: IO[Any]) -> Iterator[Callable[[int], bytes]]:
    """Put ``stream`` into raw mode and yield a reader for its descriptor.

    Output post-processing stays enabled so log lines keep their carriage
    returns. The previous mode is restored on every exit path.
    """
    try:
        import termios
        import tty
    except ImportError as exc:
        raise TerminalError("raw terminal input is not supported here") from exc

    try:
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
    except (termios.error, OSError, ValueError) as exc:
        raise TerminalError(f"input is not a terminal: {exc}") from exc

    try:
        tty.setraw(fd, termios.TCSANOW)
        mode = termios.tcgetattr(fd)
        mode[1] |= termios.OPOST | termios.ONLCR
        termios.tcsetattr(fd, termios.TCSANOW, mode)
    except (termios.error, OSError) as exc:
        termios.tcsetattr(fd, termios.TCSANOW, saved)
        raise TerminalError(f"cannot switch terminal to raw mode: {exc}") from exc

    try:
        yield functools.partial(os.read, fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
