class HRCacheError(Exception):
    """Base exception class for the HR cache library."""

    pass


class ListenerError(HRCacheError):
    """Raised for a subscriber callback that failed during notification.

    Never propagated to the caller of the mutating operation; it is handed
    to the cache's error sink instead.
    """

    def __init__(self, message, listener=None, key=None, value=None):
        super().__init__(message)
        self.listener = listener
        self.key = key
        self.value = value


class MalformedPatternError(HRCacheError):
    """Raised for an invalidation pattern that cannot be compiled."""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.source = source


class ConfigError(HRCacheError):
    """Raised for configuration-related errors."""

    pass
