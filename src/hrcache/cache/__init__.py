"""Cache module for the HR attendance client."""

from .accessor import CacheAccessor
from .cache_manager import CacheDuration, CacheEntry, KeyedTTLCache, wall_clock_ms
from .fetch import cached_fetch
from .keys import create_cache_key
from .selectors import CLEAR_ALL, Exact, Pattern

__all__ = [
    'CacheAccessor',
    'CacheDuration',
    'CacheEntry',
    'KeyedTTLCache',
    'wall_clock_ms',
    'cached_fetch',
    'create_cache_key',
    'CLEAR_ALL',
    'Exact',
    'Pattern',
]
