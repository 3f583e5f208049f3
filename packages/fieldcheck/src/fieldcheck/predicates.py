"""
Peer predicates: range, text length, pattern, equality, membership, time range.

Each predicate is a pure function returning a verdict. Wrong argument types
are caller defects and raise ``InvalidArgumentError``; they are never
reported as a failed verdict.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping, Set
from numbers import Integral
from typing import Any

from .exceptions import InvalidArgumentError
from .kinds import ValueKind, classify, dereference, record_fields
from .patterns import PatternLike, compile_pattern


def _require_int(name: str, value: Any) -> None:
    if not isinstance(value, Integral) or isinstance(value, bool):
        raise InvalidArgumentError(name, "int", value)


def in_range(value: int, min_value: int, max_value: int) -> bool:
    """True if ``min_value <= value <= max_value`` (both bounds inclusive)."""
    _require_int("value", value)
    _require_int("min_value", min_value)
    _require_int("max_value", max_value)
    return min_value <= value <= max_value


def text_length_in_range(text: str, min_length: int, max_length: int) -> bool:
    """
    True if the number of characters in *text* is within the inclusive bounds.

    Characters are Unicode code points, so ``"日本語"`` has length 3.
    """
    if not isinstance(text, str):
        raise InvalidArgumentError("text", "str", text)
    _require_int("min_length", min_length)
    _require_int("max_length", max_length)
    return min_length <= len(text) <= max_length


def matches(text: str, pattern: PatternLike) -> bool:
    """True if *pattern* is found anywhere in *text*."""
    return compile_pattern(pattern).search(text) is not None


_IdPair = tuple[int, int]


def _collections_equal(value: Any, expected: Any, path: set[_IdPair]) -> bool:
    if isinstance(value, Mapping) or isinstance(expected, Mapping):
        if not (isinstance(value, Mapping) and isinstance(expected, Mapping)):
            return False
        if value.keys() != expected.keys():
            return False
        return all(_equal(value[key], expected[key], path) for key in value)
    if isinstance(value, Set) or isinstance(expected, Set):
        return bool(value == expected)
    if not (isinstance(value, type(expected)) or isinstance(expected, type(value))):
        return False
    if len(value) != len(expected):
        return False
    return all(_equal(a, b, path) for a, b in zip(value, expected))


def _records_equal(value: Any, expected: Any, path: set[_IdPair]) -> bool:
    if type(value) is not type(expected):
        return False
    return all(
        _equal(a, b, path)
        for (_, a), (_, b) in zip(record_fields(value), record_fields(expected))
    )


def _equal(value: Any, expected: Any, path: set[_IdPair]) -> bool:
    if value is None and expected is None:
        return True
    kind = classify(value)
    if kind is not classify(expected):
        return False
    if kind is ValueKind.INDIRECT:
        return _equal(dereference(value), dereference(expected), path)
    if kind is not ValueKind.RECORD and kind is not ValueKind.COLLECTION:
        return bool(value == expected)
    # A pair already being compared further up is assumed equal.
    pair = (id(value), id(expected))
    if pair in path:
        return True
    path.add(pair)
    try:
        if kind is ValueKind.RECORD:
            return _records_equal(value, expected, path)
        return _collections_equal(value, expected, path)
    finally:
        path.discard(pair)


def equal(value: Any, expected: Any) -> bool:
    """
    Structural equality.

    Values of different kinds are never equal, so ``equal(None, False)`` and
    ``equal(True, 1)`` are both False. Records and collections are compared
    item by item with this same function; self-referencing structures are
    compared without looping.
    """
    return _equal(value, expected, set())


def contains(value: Any, collection: Any) -> bool:
    """
    True if some item of *collection* is ``equal`` to *value*.

    Mappings are searched by key. Anything that is not a collection
    contains nothing.
    """
    if classify(collection) is not ValueKind.COLLECTION:
        return False
    return any(equal(value, item) for item in collection)


def time_in_range(
    instant: datetime.datetime,
    start: datetime.datetime,
    end: datetime.datetime,
) -> bool:
    """True if ``start <= instant <= end`` (both bounds inclusive)."""
    return start <= instant <= end
