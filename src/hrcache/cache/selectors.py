"""Invalidation selectors for the keyed TTL cache."""

import logging
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from hrcache.utils.exceptions import MalformedPatternError

logger = logging.getLogger(__name__)

# Key passed to subscribers when the whole cache is cleared.
CLEAR_ALL = "*"


@dataclass(frozen=True)
class Exact:
    """Selects a single key by exact string equality."""

    key: str

    def matches(self, key: str) -> bool:
        return key == self.key

    def __str__(self) -> str:
        return self.key


def _malformed(source, reason) -> MalformedPatternError:
    error = MalformedPatternError(
        f"Invalid invalidation pattern {source!r}: {reason}", source=source
    )
    logger.warning("%s; it will match no keys", error)
    return error


def _compile_source(source, flags: int):
    """Compile a str pattern; anything that cannot match str keys is malformed."""
    if not isinstance(source, str):
        return None, _malformed(source, "pattern must be a str")
    try:
        return re.compile(source, flags), None
    except (re.error, TypeError, ValueError, OverflowError) as e:
        return None, _malformed(source, e)


@dataclass(frozen=True)
class Pattern:
    """Selects every key the regular expression finds a match in.

    ``Pattern("^user:")`` compiles its source on construction. A source
    that fails to compile, or a bytes pattern, produces a pattern that
    matches nothing and carries the failure on ``error``.
    """

    source: str
    flags: int = 0
    regex: Optional[re.Pattern] = field(default=None, compare=False, repr=False)
    error: Optional[MalformedPatternError] = field(
        default=None, compare=False, repr=False
    )

    def __post_init__(self):
        if self.error is not None:
            return
        if self.regex is None:
            regex, error = _compile_source(self.source, self.flags)
        elif not isinstance(getattr(self.regex, "pattern", None), str):
            source = getattr(self.regex, "pattern", self.regex)
            regex, error = None, _malformed(source, "pattern must be a str")
        else:
            return
        object.__setattr__(self, "regex", regex)
        object.__setattr__(self, "error", error)

    @classmethod
    def compile(cls, pattern: Union[str, re.Pattern], flags: int = 0) -> "Pattern":
        if isinstance(pattern, re.Pattern):
            return cls(source=pattern.pattern, flags=pattern.flags, regex=pattern)
        return cls(source=pattern, flags=flags)

    def matches(self, key: str) -> bool:
        if self.regex is None:
            return False
        return self.regex.search(key) is not None

    def __str__(self) -> str:
        return f"/{self.source}/"


Selector = Union[Exact, Pattern]
