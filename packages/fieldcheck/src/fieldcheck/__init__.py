from .emptiness import is_empty, is_not_empty
from .exceptions import (
    FieldCheckError,
    InvalidArgumentError,
    InvalidPatternError,
    MessageTemplateError,
)
from .kinds import ValueKind, classify
from .messages import DEFAULT_MESSAGES, MessageTemplates, render_message
from .patterns import compile_pattern
from .predicates import (
    contains,
    equal,
    in_range,
    matches,
    text_length_in_range,
    time_in_range,
)
from .validator import Validator

__all__ = [
    # Emptiness
    "is_empty",
    "is_not_empty",
    "ValueKind",
    "classify",
    # Predicates
    "in_range",
    "text_length_in_range",
    "matches",
    "equal",
    "contains",
    "time_in_range",
    "compile_pattern",
    # Accumulator
    "Validator",
    # Messages
    "MessageTemplates",
    "DEFAULT_MESSAGES",
    "render_message",
    # Exceptions
    "FieldCheckError",
    "InvalidArgumentError",
    "InvalidPatternError",
    "MessageTemplateError",
]
