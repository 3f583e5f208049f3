"""Regular-expression compilation for the pattern rule."""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from .exceptions import InvalidPatternError

logger = logging.getLogger(__name__)

PatternLike = str | re.Pattern[str]


@lru_cache(maxsize=256)
def _compile(source: str) -> re.Pattern[str]:
    try:
        return re.compile(source)
    except re.error as exc:
        logger.debug("Rejected pattern %r: %s", source, exc)
        raise InvalidPatternError(source, str(exc)) from exc


def compile_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """
    Return a compiled pattern.

    Already compiled patterns pass through. String patterns are compiled
    once and cached.

    Raises:
        InvalidPatternError: If the pattern does not compile.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return _compile(pattern)


def pattern_source(pattern: PatternLike) -> str:
    """The pattern text, for error messages."""
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern
