"""
Exception hierarchy for caller misuse.

Validation failures are never raised: they are booleans and accumulated
messages. These exceptions signal defects in the calling code (a malformed
pattern, a range rule fed a non-integer, a broken message template).

All exceptions inherit from ``FieldCheckError`` and provide ``to_dict()``
for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class FieldCheckError(Exception):
    """Base exception for all fieldcheck errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidPatternError(FieldCheckError, ValueError):
    """A regular expression could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_PATTERN",
            "pattern": self.pattern,
            "reason": self.reason,
        }


class InvalidArgumentError(FieldCheckError, TypeError):
    """
    A rule was called with an argument of the wrong type.

    Example error message::

        Argument 'min_value' must be int, got float (1.5)
    """

    def __init__(self, argument: str, expected: str, actual: Any) -> None:
        self.argument = argument
        self.expected = expected
        self.actual_type = type(actual).__name__
        super().__init__(
            f"Argument '{argument}' must be {expected}, "
            f"got {self.actual_type} ({actual!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "argument": self.argument,
            "expected": self.expected,
            "actual_type": self.actual_type,
        }


class MessageTemplateError(FieldCheckError, ValueError):
    """A message template cannot be rendered with the rule's parameters."""

    def __init__(self, template: str, arity: int, reason: str) -> None:
        self.template = template
        self.arity = arity
        self.reason = reason
        super().__init__(
            f"Cannot render template {template!r} with {arity} "
            f"parameter(s): {reason}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MESSAGE_TEMPLATE_ERROR",
            "template": self.template,
            "arity": self.arity,
            "reason": self.reason,
        }
