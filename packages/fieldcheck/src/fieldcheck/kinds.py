"""
Value classification.

Every Python value is mapped onto exactly one ``ValueKind``. Emptiness and
structural equality dispatch on the kind instead of on concrete types, so
new concrete types only need to land in the right kind here.
"""

from __future__ import annotations

import dataclasses
import datetime
import weakref
from collections.abc import Collection, Iterator
from enum import Enum
from numbers import Number
from typing import Any

from pydantic import BaseModel, SecretBytes, SecretStr

from .exceptions import InvalidArgumentError

ZERO_DATETIME = datetime.datetime.min
ZERO_DATETIME_UTC = datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
ZERO_DATE = datetime.date.min
ZERO_TIME = datetime.time.min
ZERO_DURATION = datetime.timedelta(0)


class ValueKind(str, Enum):
    """Closed set of value shapes understood by the predicates."""

    ABSENT = "absent"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    TEXT = "text"
    TIME = "time"
    INDIRECT = "indirect"
    RECORD = "record"
    COLLECTION = "collection"
    OTHER = "other"


def is_record(value: Any) -> bool:
    """True for dataclass instances, pydantic models and named tuples."""
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def classify(value: Any) -> ValueKind:
    """
    Return the ``ValueKind`` of *value*.

    The checks run in a fixed order: ``bool`` before numbers (it subclasses
    ``int``), ``str`` before collections, and records (including named
    tuples) before collections.
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, Number | datetime.timedelta):
        return ValueKind.NUMERIC
    if isinstance(value, datetime.date | datetime.time):
        return ValueKind.TIME
    if isinstance(value, weakref.ref | SecretStr | SecretBytes):
        return ValueKind.INDIRECT
    if is_record(value):
        return ValueKind.RECORD
    if isinstance(value, Collection):
        return ValueKind.COLLECTION
    return ValueKind.OTHER


def record_fields(value: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` pairs of a record in declaration order."""
    if isinstance(value, BaseModel):
        for name in type(value).model_fields:
            yield name, getattr(value, name)
    elif isinstance(value, tuple):
        yield from zip(type(value)._fields, value)  # type: ignore[attr-defined]
    else:
        for f in dataclasses.fields(value):
            # init=False fields may never have been assigned.
            yield f.name, getattr(value, f.name, None)


def dereference(value: Any) -> Any:
    """
    Return the referent of an indirect value.

    A dead weak reference yields ``None``.
    """
    if isinstance(value, weakref.ref):
        return value()
    if isinstance(value, SecretStr | SecretBytes):
        return value.get_secret_value()
    raise InvalidArgumentError("value", "an indirect reference", value)
