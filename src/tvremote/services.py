"""Discovery and cache orchestration."""

from __future__ import annotations

import logging

from tvremote.config import DiscoveryConfig
from tvremote.core import NameResolver, discover
from tvremote.models import DeviceRecord
from tvremote.storage import DeviceCache, merge, values

logger = logging.getLogger(__name__)


async def discover_and_cache(
    cache: DeviceCache,
    config: DiscoveryConfig,
    window: float | None = None,
) -> list[DeviceRecord]:
    """Run one discovery pass, merge it into the cache and persist the result.

    A failed save is logged; the merged devices are returned either way.
    """
    existing = cache.load()
    fresh = await discover(
        window if window is not None else config.window,
        resolver=NameResolver(timeout=config.resolve_timeout),
    )
    merged = merge(existing, fresh)
    try:
        cache.save(merged)
    except OSError as exc:
        logger.warning("Could not write device cache %s: %s", cache.path, exc)
    return values(merged)
