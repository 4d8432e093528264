from __future__ import annotations

import asyncio
import html
import logging
import re

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

_FRIENDLY_NAME = re.compile(
    r"<friendlyName>(.*?)</friendlyName>", re.IGNORECASE | re.DOTALL
)


def extract_friendly_name(document: str) -> str | None:
    match = _FRIENDLY_NAME.search(document)
    if match is None:
        return None
    name = html.unescape(match.group(1)).strip()
    return name or None


class NameResolver:
    """Fetch a device description document and pull out its friendly name.

    Failures are logged and reported as ``None`` so the caller can keep its
    fallback name.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    async def resolve(self, location: str) -> str | None:
        logger.debug("Fetching device description %s", location)
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.get(location) as response:
                    document = await response.text(errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            reason = str(exc) or type(exc).__name__
            logger.warning("Could not fetch %s: %s", location, reason)
            return None

        name = extract_friendly_name(document)
        if name is None:
            logger.debug("No friendlyName in description from %s", location)
        return name
