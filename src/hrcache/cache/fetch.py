"""Read-through helper for caching the result of an async fetch."""

import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Optional

from hrcache.cache.cache_manager import KeyedTTLCache

logger = logging.getLogger(__name__)


def _unwrap(response: Any) -> Any:
    """Return the ``data`` payload of an API response if it carries one."""
    if isinstance(response, Mapping):
        data = response.get("data")
    else:
        data = getattr(response, "data", None)
    return data if data is not None else response


async def cached_fetch(
    cache: KeyedTTLCache,
    key: str,
    fetcher: Callable[[], Awaitable[Any]],
    duration_ms: Optional[int] = None,
) -> Any:
    """
    Get value for key from cache, fetching and storing it on a miss.

    Concurrent misses for the same key each call ``fetcher``; the last
    result stored wins. Fetcher errors propagate and nothing is cached.
    """
    cached = cache.get(key)
    if cached is not None:
        logger.debug(f"Cache hit for {key}")
        return cached

    logger.debug(f"Cache miss for {key}, fetching")
    result = _unwrap(await fetcher())
    cache.set(key, result, duration_ms)
    return result
