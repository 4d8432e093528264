from __future__ import annotations

from .decoder import FRAME_SIZE, KEY_TABLE, decode, read_key
from .discovery import DiscoveryReply, discover, parse_headers, parse_reply
from .remote import RemoteClient, RemoteError, SamsungRemote
from .resolver import NameResolver, extract_friendly_name
from .session import REMOTE_KEYS, ControlSession, SelectionCancelled, select_device

__all__ = [
    "FRAME_SIZE",
    "KEY_TABLE",
    "REMOTE_KEYS",
    "ControlSession",
    "DiscoveryReply",
    "NameResolver",
    "RemoteClient",
    "RemoteError",
    "SamsungRemote",
    "SelectionCancelled",
    "decode",
    "discover",
    "extract_friendly_name",
    "parse_headers",
    "parse_reply",
    "read_key",
    "select_device",
]
