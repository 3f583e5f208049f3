"""
Default error messages and message rendering.

Templates are plain text with positional ``{}`` placeholders, filled with
the rule's parameters in order (for range rules: lower bound, upper bound).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from .exceptions import MessageTemplateError

# Number of parameters each rule passes to its template.
TEMPLATE_ARITY: dict[str, int] = {
    "not_empty": 0,
    "in_range": 2,
    "text_length": 2,
    "matches": 1,
    "equal": 1,
    "contains": 1,
    "time_in_range": 2,
    "custom": 0,
}


def render_message(template: str, *params: Any) -> str:
    """
    Substitute *params* into *template*.

    Unused parameters are ignored, so a template without placeholders is
    returned unchanged.

    Raises:
        MessageTemplateError: If the template needs parameters that were
            not supplied, uses named placeholders, or is malformed.
    """
    try:
        return template.format(*params)
    except (IndexError, KeyError, ValueError) as exc:
        raise MessageTemplateError(template, len(params), str(exc)) from exc


class MessageTemplates(BaseModel):
    """
    One message template per rule.

    Templates are checked when the model is built, so a template that
    cannot be rendered with its rule's parameters is rejected up front::

        messages = MessageTemplates(in_range="should be from {} to {}")
        validator = Validator(messages=messages)
    """

    model_config = ConfigDict(frozen=True)

    not_empty: str = "can't be blank"
    in_range: str = "must be between {} and {}"
    text_length: str = "string length must be between {} and {}"
    matches: str = 'must match with pattern "{}"'
    equal: str = "must be {}"
    contains: str = "must be one of following values. {}"
    time_in_range: str = "must be between {} and {}"
    custom: str = "is invalid"

    @field_validator("*")
    @classmethod
    def _check_renderable(cls, template: str, info: ValidationInfo) -> str:
        arity = TEMPLATE_ARITY[info.field_name or ""]
        render_message(template, *(["?"] * arity))
        return template


DEFAULT_MESSAGES = MessageTemplates()
