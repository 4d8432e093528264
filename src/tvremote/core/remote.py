from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from samsungtvws import SamsungTVWS
from samsungtvws.exceptions import ConnectionFailure
from wakeonlan import send_magic_packet
from websocket import WebSocketException

from tvremote.config import RemoteConfig
from tvremote.models import DeviceRecord

logger = logging.getLogger(__name__)


class RemoteError(RuntimeError):
    """A command could not be delivered to the TV."""


class RemoteClient(Protocol):
    def wake(self) -> None: ...

    def send_key(self, code: str) -> None: ...

    def send_keys(self, codes: Sequence[str]) -> None: ...


def token_path(token_dir: Path, device: DeviceRecord) -> Path:
    return token_dir / f"{device.mac.replace(':', '').lower()}.token"


class SamsungRemote:
    """RemoteClient backed by the Samsung websocket API and Wake-on-LAN."""

    def __init__(
        self, device: DeviceRecord, config: RemoteConfig, token_dir: Path
    ) -> None:
        self._device = device
        token_file = token_path(token_dir, device)
        token_file.parent.mkdir(parents=True, exist_ok=True)
        self._tv = SamsungTVWS(
            host=device.ip,
            port=config.port,
            token_file=str(token_file),
            timeout=config.timeout,
            key_press_delay=config.key_press_delay,
            name=config.name,
        )

    @property
    def device(self) -> DeviceRecord:
        return self._device

    def wake(self) -> None:
        if not self._device.has_known_mac:
            logger.warning(
                "No MAC address known for %s, skipping Wake-on-LAN", self._device.ip
            )
            return
        logger.debug("Sending magic packet to %s", self._device.mac)
        try:
            send_magic_packet(self._device.mac)
        except (OSError, ValueError) as exc:
            raise RemoteError(f"Wake-on-LAN failed: {exc}") from exc

    def send_key(self, code: str) -> None:
        logger.debug("Sending %s to %s", code, self._device.ip)
        try:
            self._tv.send_key(code)
        except (ConnectionFailure, WebSocketException, OSError) as exc:
            raise RemoteError(f"Could not send {code}: {exc}") from exc

    def send_keys(self, codes: Sequence[str]) -> None:
        for code in codes:
            self.send_key(code)

    def close(self) -> None:
        try:
            self._tv.close()
        except (WebSocketException, OSError) as exc:
            logger.debug("Error closing connection to %s: %s", self._device.ip, exc)
