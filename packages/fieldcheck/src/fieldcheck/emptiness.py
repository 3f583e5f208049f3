"""
Generic emptiness check.

``is_empty`` classifies a value and applies the rule for its kind:

- absent, ``False``, ``""`` and numeric zeros are empty;
- time values are empty at their type's zero instant (``datetime.min``,
  not the Unix epoch);
- indirect values are empty when the referent is gone or itself empty;
- records are empty when every field is empty;
- collections are empty when they hold no items, whatever the items are;
- anything else is never empty.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

from typing_extensions import assert_never

from .kinds import (
    ZERO_DATE,
    ZERO_DATETIME,
    ZERO_DATETIME_UTC,
    ZERO_DURATION,
    ZERO_TIME,
    ValueKind,
    classify,
    dereference,
    record_fields,
)


def _is_zero_number(value: Any) -> bool:
    if isinstance(value, datetime.timedelta):
        return value == ZERO_DURATION
    if isinstance(value, Decimal):
        return value.is_zero()
    return bool(value == 0)


def _is_zero_instant(value: datetime.date | datetime.time) -> bool:
    if isinstance(value, datetime.datetime):
        if value.utcoffset() is None:
            return value == ZERO_DATETIME
        return value == ZERO_DATETIME_UTC
    if isinstance(value, datetime.date):
        return value == ZERO_DATE
    return value.replace(tzinfo=None) == ZERO_TIME


def _is_empty(value: Any, path: set[int]) -> bool:
    kind = classify(value)
    if kind is ValueKind.ABSENT:
        return True
    if kind is ValueKind.BOOLEAN:
        return not value
    if kind is ValueKind.TEXT:
        return value == ""
    if kind is ValueKind.NUMERIC:
        return _is_zero_number(value)
    if kind is ValueKind.TIME:
        return _is_zero_instant(value)
    if kind is ValueKind.INDIRECT:
        return _is_empty(dereference(value), path)
    if kind is ValueKind.RECORD:
        # A record reached again through its own fields is never empty.
        if id(value) in path:
            return False
        path.add(id(value))
        try:
            return all(
                _is_empty(field_value, path) for _, field_value in record_fields(value)
            )
        finally:
            path.discard(id(value))
    if kind is ValueKind.COLLECTION:
        return len(value) == 0
    if kind is ValueKind.OTHER:
        return False
    assert_never(kind)


def is_empty(value: Any) -> bool:
    """
    Return True if *value* holds no meaningful data.

    Records may refer back to themselves (a parent pointer, say); a record
    met again on the current path counts as not empty.
    """
    return _is_empty(value, set())


def is_not_empty(value: Any) -> bool:
    return not is_empty(value)
