"""SSDP discovery of Samsung TVs."""

from __future__ import annotations

import asyncio
import logging
import re
import socket
from collections.abc import Callable
from dataclasses import dataclass
from typing import cast

from tvremote.models import UNKNOWN_MAC, DeviceRecord, normalize_mac

from .resolver import NameResolver

logger = logging.getLogger(__name__)

SSDP_ADDR = "239.255.255.250"
SSDP_PORT = 1900
SEARCH_TARGET = "urn:dial-multiscreen-org:service:dial:1"
MULTICAST_TTL = 2
BRAND_MARKER = "Samsung"
DEFAULT_WINDOW = 0.25

M_SEARCH = "\r\n".join(
    [
        "M-SEARCH * HTTP/1.1",
        f"HOST: {SSDP_ADDR}:{SSDP_PORT}",
        'MAN: "ssdp:discover"',
        "MX: 10",
        f"ST: {SEARCH_TARGET}",
        "",
        "",
    ]
).encode("ascii")

_WAKEUP_MAC = re.compile(r"WAKEUP:\s*MAC=([0-9a-fA-F:]+)")


@dataclass(frozen=True)
class DiscoveryReply:
    ip: str
    mac: str = UNKNOWN_MAC
    location: str | None = None

    def to_record(self, friendly_name: str | None = None) -> DeviceRecord:
        return DeviceRecord(
            friendly_name=friendly_name or self.ip, ip=self.ip, mac=self.mac
        )


def parse_headers(text: str) -> dict[str, str]:
    headers: dict[str, str] = {}
    for line in text.split("\n"):
        key, sep, value = line.partition(":")
        if not sep:
            continue
        headers[key.strip().upper()] = value.strip()
    return headers


def parse_reply(text: str, ip: str) -> DiscoveryReply | None:
    """Project an SSDP response onto the fields we care about.

    Returns None for responders that are not Samsung devices.
    """
    if BRAND_MARKER not in text:
        return None
    headers = parse_headers(text)
    match = _WAKEUP_MAC.search(text)
    return DiscoveryReply(
        ip=ip,
        mac=normalize_mac(match.group(1)) if match else UNKNOWN_MAC,
        location=headers.get("LOCATION") or None,
    )


class _SearchProtocol(asyncio.DatagramProtocol):
    def __init__(
        self,
        target: tuple[str, int],
        on_reply: Callable[[DiscoveryReply], None],
    ) -> None:
        self._target = target
        self._on_reply = on_reply

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        logger.debug("Sending M-SEARCH to %s:%d", *self._target)
        cast(asyncio.DatagramTransport, transport).sendto(M_SEARCH, self._target)

    def datagram_received(self, data: bytes, addr: tuple[str, int]) -> None:
        text = data.decode("utf-8", errors="replace")
        reply = parse_reply(text, addr[0])
        if reply is None:
            logger.debug("Ignoring SSDP response from %s", addr[0])
            return
        logger.debug("SSDP response from %s (mac=%s)", reply.ip, reply.mac)
        self._on_reply(reply)

    def error_received(self, exc: Exception) -> None:
        logger.warning("Discovery socket error: %s", exc)


def _open_socket() -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, MULTICAST_TTL)
        sock.bind(("", 0))
        sock.setblocking(False)
    except OSError:
        sock.close()
        raise
    return sock


async def discover(
    window: float = DEFAULT_WINDOW,
    *,
    resolver: NameResolver | None = None,
    target: tuple[str, int] = (SSDP_ADDR, SSDP_PORT),
) -> list[DeviceRecord]:
    """Search for Samsung TVs for at most ``window`` seconds.

    Returns as soon as the first device has been collected. Replies whose
    name lookup is still running when the search ends are kept under their
    IP. Transport errors are logged and yield whatever was collected so far.
    """
    loop = asyncio.get_running_loop()
    resolver = resolver or NameResolver()
    devices: list[DeviceRecord] = []
    found = asyncio.Event()
    pending: dict[asyncio.Task[None], DiscoveryReply] = {}

    async def handle(reply: DiscoveryReply) -> None:
        name = None
        if reply.location:
            name = await resolver.resolve(reply.location)
        devices.append(reply.to_record(name))
        found.set()

    def on_done(task: asyncio.Task[None]) -> None:
        pending.pop(task, None)
        if not task.cancelled() and task.exception() is not None:
            logger.warning("Dropping discovery reply: %s", task.exception())

    def on_reply(reply: DiscoveryReply) -> None:
        task = loop.create_task(handle(reply))
        pending[task] = reply
        task.add_done_callback(on_done)

    try:
        sock = _open_socket()
    except OSError as exc:
        logger.warning("Could not open discovery socket: %s", exc)
        return []

    transport: asyncio.BaseTransport | None = None
    try:
        transport, _ = await loop.create_datagram_endpoint(
            lambda: _SearchProtocol(target, on_reply), sock=sock
        )
        try:
            await asyncio.wait_for(found.wait(), timeout=window)
        except asyncio.TimeoutError:
            logger.debug("Discovery window of %.3fs elapsed", window)
    except OSError as exc:
        logger.warning("Discovery failed: %s", exc)
    finally:
        if transport is not None:
            transport.close()
        else:
            sock.close()
        unresolved = [
            (task, reply) for task, reply in pending.items() if not task.done()
        ]
        for task, reply in unresolved:
            task.cancel()
            logger.debug("Name lookup for %s still running, using its IP", reply.ip)
            devices.append(reply.to_record())
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    logger.debug("Discovery complete: found %d device(s)", len(devices))
    return list(devices)
