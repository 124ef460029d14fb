"""Keyed TTL cache with pattern invalidation and change notification."""

import logging
import re
import time
from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable, Dict, List, Optional, Union

from hrcache.cache.selectors import CLEAR_ALL, Exact, Pattern, Selector
from hrcache.utils.config_parser import CacheConfig
from hrcache.utils.exceptions import ListenerError

logger = logging.getLogger(__name__)

Listener = Callable[[Any, Any], None]
ErrorSink = Callable[[ListenerError], None]


class CacheDuration:
    """Conventional entry lifetimes in milliseconds."""

    SHORT = 30 * 1000
    MEDIUM = 5 * 60 * 1000
    LONG = 30 * 60 * 1000
    VERY_LONG = 60 * 60 * 1000

    @classmethod
    def as_dict(cls) -> Dict[str, int]:
        return {
            "SHORT": cls.SHORT,
            "MEDIUM": cls.MEDIUM,
            "LONG": cls.LONG,
            "VERY_LONG": cls.VERY_LONG,
        }


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds since the epoch."""
    return time.time() * 1000


def log_listener_error(error: ListenerError) -> None:
    """Default error sink: log the failure and carry on."""
    logger.error(
        f"Cache listener error for key {error.key!r}: {error}",
        exc_info=error.__cause__,
    )


def _as_selector(selector: Any) -> Optional[Selector]:
    if isinstance(selector, (Exact, Pattern)):
        return selector
    if isinstance(selector, str):
        return Exact(selector)
    if isinstance(selector, re.Pattern):
        return Pattern.compile(selector)
    logger.warning(f"Unsupported invalidation selector {selector!r}; nothing removed")
    return None


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class _Subscription:
    """Registration handle; identity distinguishes repeat subscriptions."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener):
        self.listener = listener


class KeyedTTLCache:
    """
    In-memory key/value store where every entry carries an expiration.

    Expired entries are purged lazily on access; there is no background
    sweep. Every mutation is broadcast to subscribers in registration order
    before the mutating call returns. A single re-entrant lock guards the
    store, so listeners may call back into the cache from the same thread.
    """

    def __init__(
        self,
        default_duration_ms: int = CacheDuration.MEDIUM,
        clock: Callable[[], float] = wall_clock_ms,
        error_sink: Optional[ErrorSink] = None,
    ):
        self.default_duration_ms = default_duration_ms
        self.clock = clock
        self.error_sink = error_sink or log_listener_error
        self.cache: Dict[str, CacheEntry] = {}
        self.lock = RLock()
        self._subscriptions: List[_Subscription] = []
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_config(cls, config: CacheConfig, **kwargs) -> "KeyedTTLCache":
        """Create a cache from a CacheConfig section."""
        return cls(default_duration_ms=config.default_duration_ms, **kwargs)

    def get(self, key: str) -> Optional[Any]:
        """Get value from cache if it exists and hasn't expired."""
        with self.lock:
            entry = self.cache.get(key)
            if entry is None:
                self.misses += 1
                return None

            if self.clock() >= entry.expires_at:
                del self.cache[key]
                self.misses += 1
                return None

            self.hits += 1
            return entry.value

    def set(self, key: str, value: Any, duration_ms: Optional[int] = None) -> None:
        """Store value under key for duration_ms milliseconds (default if omitted)."""
        if duration_ms is None:
            duration_ms = self.default_duration_ms

        with self.lock:
            expires_at = self.clock() + max(duration_ms, 0)
            self.cache[key] = CacheEntry(value=value, expires_at=expires_at)
            self._notify(key, value)

    def invalidate(self, selector: Union[Selector, str, re.Pattern]) -> None:
        """Remove the entries the selector picks out and notify subscribers.

        A plain str is taken as an exact key and a compiled regex as a
        pattern. Any other argument selects nothing. Subscribers receive
        the argument exactly as given.
        """
        self._invalidate(_as_selector(selector), selector)

    def invalidate_key(self, key: str) -> None:
        """Remove key; subscribers receive the key string itself."""
        self._invalidate(Exact(key), key)

    def invalidate_matching(self, pattern: Union[str, re.Pattern], flags: int = 0) -> None:
        """Remove keys matching pattern; subscribers receive pattern as given."""
        self._invalidate(Pattern.compile(pattern, flags), pattern)

    def _invalidate(self, selector: Optional[Selector], notify_key: Any) -> None:
        with self.lock:
            if isinstance(selector, Exact):
                self.cache.pop(selector.key, None)
            elif selector is not None:
                for key in [k for k in self.cache if selector.matches(k)]:
                    del self.cache[key]
            self._notify(notify_key, None)

    def clear(self) -> None:
        """Clear all cache entries."""
        with self.lock:
            self.cache.clear()
            self._notify(CLEAR_ALL, None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with (key, value) on every mutation.

        Returns a disposer that removes this registration; calling it again
        does nothing.
        """
        subscription = _Subscription(listener)
        with self.lock:
            self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            with self.lock:
                for i, existing in enumerate(self._subscriptions):
                    if existing is subscription:
                        del self._subscriptions[i]
                        break

        return unsubscribe

    def _notify(self, key: Any, value: Any) -> None:
        # Snapshot so listeners may (un)subscribe while being notified
        for subscription in tuple(self._subscriptions):
            try:
                subscription.listener(key, value)
            except Exception as e:
                error = ListenerError(str(e), listener=subscription.listener, key=key, value=value)
                error.__cause__ = e
                try:
                    self.error_sink(error)
                except Exception:
                    logger.exception("Cache error sink failed")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        ``keys`` may include entries that have expired but not yet been
        purged by a ``get``.
        """
        with self.lock:
            total_requests = self.hits + self.misses
            hit_rate = self.hits / total_requests if total_requests > 0 else 0

            return {
                "size": len(self.cache),
                "keys": list(self.cache),
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": hit_rate,
            }

    def __len__(self) -> int:
        with self.lock:
            return len(self.cache)

    def __contains__(self, key: str) -> bool:
        with self.lock:
            entry = self.cache.get(key)
            if entry is None:
                return False
            if self.clock() >= entry.expires_at:
                del self.cache[key]
                return False
            return True
