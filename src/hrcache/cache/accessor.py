from typing import Any, Optional

from hrcache.cache.cache_manager import KeyedTTLCache
from hrcache.cache.selectors import Selector


class CacheAccessor:
    """Read/write view of a cache without subscription or diagnostics."""

    def __init__(self, cache: KeyedTTLCache):
        self._cache = cache

    def get(self, key: str) -> Optional[Any]:
        return self._cache.get(key)

    def set(self, key: str, value: Any, duration_ms: Optional[int] = None) -> None:
        self._cache.set(key, value, duration_ms)

    def invalidate(self, selector: Selector) -> None:
        self._cache.invalidate(selector)

    def clear(self) -> None:
        self._cache.clear()
