"""Validator — runs predicates against named fields and collects messages."""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from . import predicates
from .emptiness import is_not_empty
from .exceptions import InvalidArgumentError
from .messages import DEFAULT_MESSAGES, MessageTemplates, render_message
from .patterns import PatternLike, compile_pattern, pattern_source

logger = logging.getLogger(__name__)


class Validator:
    """
    Accumulates one error message per field for a single validation pass.

    Each rule method runs a predicate, records a message under *key* when
    the predicate fails and returns the verdict, so dependent checks can be
    short-circuited::

        v = Validator()
        v.not_empty(form.name, "name")
        if v.not_empty(form.age, "age"):
            v.in_range(form.age, 18, 120, "age")
        if v.has_errors():
            return {"errors": dict(v.errors)}

    A later failure on the same key replaces the earlier message. A later
    success never clears it.

    A validator is not meant to be shared between passes or threads.
    """

    def __init__(self, messages: MessageTemplates | None = None) -> None:
        self._messages = messages if messages is not None else DEFAULT_MESSAGES
        self._errors: dict[str, str] = {}

    @property
    def messages(self) -> MessageTemplates:
        return self._messages

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only view of ``{key: message}``."""
        return MappingProxyType(self._errors)

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def error_for(self, key: str) -> str | None:
        return self._errors.get(key)

    # -- primitives ----------------------------------------------------------

    def add_error(self, key: str, message: str) -> None:
        """Record *message* under *key*, replacing any previous message."""
        logger.debug("Validation failed for %r: %s", key, message)
        self._errors[key] = message

    def set_error_if(self, condition: bool, key: str, message: str) -> None:
        """
        Record *message* under *key* when *condition* is true.

        *condition* states the failure, not the verdict. To report through a
        predicate of your own, negate its result::

            ok = is_valid_iban(form.iban)
            v.set_error_if(not ok, "iban", "is not a valid IBAN")
        """
        if condition:
            self.add_error(key, message)

    def _apply(
        self,
        result: bool,
        key: str,
        message: str | None,
        default: str,
        *params: Any,
    ) -> bool:
        # Rendered before the verdict is applied: a broken template raises
        # even when the rule passes.
        rendered = render_message(default if message is None else message, *params)
        self.set_error_if(not result, key, rendered)
        return result

    def check(
        self,
        func: Callable[[Validator], bool],
        key: str,
        message: str | None = None,
    ) -> bool:
        """
        Run a custom predicate and record a message if it returns False.

        *func* receives a new, separate ``Validator`` built with the same
        templates. Errors recorded on it are discarded; only the returned
        verdict is used.
        """
        if not callable(func):
            raise InvalidArgumentError("func", "a callable", func)
        scratch = Validator(messages=self._messages)
        result = bool(func(scratch))
        if scratch.has_errors():
            logger.debug(
                "Discarding %d nested error(s) from custom check for %r",
                len(scratch._errors),
                key,
            )
        return self._apply(result, key, message, self._messages.custom)

    # -- rules ---------------------------------------------------------------

    def not_empty(self, value: Any, key: str, message: str | None = None) -> bool:
        return self._apply(
            is_not_empty(value), key, message, self._messages.not_empty
        )

    def in_range(
        self,
        value: int,
        min_value: int,
        max_value: int,
        key: str,
        message: str | None = None,
    ) -> bool:
        result = predicates.in_range(value, min_value, max_value)
        return self._apply(
            result, key, message, self._messages.in_range, min_value, max_value
        )

    def text_length_in_range(
        self,
        text: str,
        min_length: int,
        max_length: int,
        key: str,
        message: str | None = None,
    ) -> bool:
        result = predicates.text_length_in_range(text, min_length, max_length)
        return self._apply(
            result, key, message, self._messages.text_length, min_length, max_length
        )

    def matches(
        self,
        text: str,
        pattern: PatternLike,
        key: str,
        message: str | None = None,
    ) -> bool:
        compiled = compile_pattern(pattern)
        result = predicates.matches(text, compiled)
        return self._apply(
            result, key, message, self._messages.matches, pattern_source(pattern)
        )

    def equal(
        self, value: Any, expected: Any, key: str, message: str | None = None
    ) -> bool:
        result = predicates.equal(value, expected)
        return self._apply(result, key, message, self._messages.equal, expected)

    def contains(
        self, value: Any, collection: Any, key: str, message: str | None = None
    ) -> bool:
        result = predicates.contains(value, collection)
        return self._apply(result, key, message, self._messages.contains, collection)

    def time_in_range(
        self,
        instant: datetime.datetime,
        start: datetime.datetime,
        end: datetime.datetime,
        key: str,
        message: str | None = None,
    ) -> bool:
        result = predicates.time_in_range(instant, start, end)
        return self._apply(
            result, key, message, self._messages.time_in_range, start, end
        )
