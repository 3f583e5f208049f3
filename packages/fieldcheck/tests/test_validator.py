"""Tests for the Validator accumulator."""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass

import pytest

from fieldcheck.exceptions import (
    InvalidArgumentError,
    InvalidPatternError,
    MessageTemplateError,
)
from fieldcheck.messages import MessageTemplates
from fieldcheck.validator import Validator


@dataclass
class SignupForm:
    name: str = ""
    age: int = 0
    email: str = ""


def test_new_validator_is_empty(validator: Validator) -> None:
    assert validator.has_errors() is False
    assert dict(validator.errors) == {}


def test_errors_view_is_read_only(validator: Validator) -> None:
    validator.add_error("name", "bad")
    with pytest.raises(TypeError):
        validator.errors["name"] = "other"  # type: ignore[index]


# ══════════════════════════════════════════════════════════════════════
# Primitives
# ══════════════════════════════════════════════════════════════════════


class TestPrimitives:
    def test_add_error(self, validator: Validator) -> None:
        validator.add_error("name", "is taken")
        assert validator.has_errors() is True
        assert validator.error_for("name") == "is taken"

    def test_set_error_if_true_records(self, validator: Validator) -> None:
        validator.set_error_if(True, "name", "is taken")
        assert validator.errors == {"name": "is taken"}

    def test_set_error_if_false_does_nothing(self, validator: Validator) -> None:
        validator.set_error_if(False, "name", "is taken")
        assert validator.has_errors() is False

    def test_set_error_if_with_negated_verdict(self, validator: Validator) -> None:
        def is_even(n: int) -> bool:
            return n % 2 == 0

        validator.set_error_if(not is_even(4), "count", "must be even")
        assert validator.has_errors() is False
        validator.set_error_if(not is_even(3), "count", "must be even")
        assert validator.error_for("count") == "must be even"

    def test_error_for_unknown_key(self, validator: Validator) -> None:
        assert validator.error_for("missing") is None

    def test_failure_is_logged(
        self, validator: Validator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="fieldcheck.validator"):
            validator.not_empty("", "name")
        assert "Validation failed for 'name': can't be blank" in caplog.text


# ══════════════════════════════════════════════════════════════════════
# Accumulation protocol
# ══════════════════════════════════════════════════════════════════════


class TestAccumulation:
    def test_range_failure_scenario(self, validator: Validator) -> None:
        assert validator.in_range(30, 50, 100, "age") is False
        assert validator.has_errors() is True
        assert validator.errors == {"age": "must be between 50 and 100"}

    def test_success_returns_true_and_records_nothing(
        self, validator: Validator
    ) -> None:
        assert validator.in_range(75, 50, 100, "age") is True
        assert validator.has_errors() is False

    def test_second_failure_overwrites_first(self, validator: Validator) -> None:
        validator.not_empty("", "name")
        validator.text_length_in_range("", 2, 10, "name")
        assert validator.errors == {
            "name": "string length must be between 2 and 10"
        }

    def test_later_success_does_not_clear_failure(self, validator: Validator) -> None:
        validator.text_length_in_range("x", 2, 10, "name")
        assert validator.not_empty("x", "name") is True
        assert validator.error_for("name") == "string length must be between 2 and 10"

    def test_one_entry_per_failed_key(self, validator: Validator) -> None:
        form = SignupForm(name="", age=12, email="not-an-email")
        validator.not_empty(form.name, "name")
        if validator.not_empty(form.age, "age"):
            validator.in_range(form.age, 18, 120, "age")
        validator.matches(form.email, r"^[^@]+@[^@]+$", "email")
        assert set(validator.errors) == {"name", "age", "email"}

    def test_short_circuit_on_verdict(self, validator: Validator) -> None:
        form = SignupForm()
        if validator.not_empty(form.age, "age"):
            validator.in_range(form.age, 18, 120, "age")
        assert validator.errors == {"age": "can't be blank"}


# ══════════════════════════════════════════════════════════════════════
# Rule methods
# ══════════════════════════════════════════════════════════════════════


class TestRules:
    def test_not_empty_on_record(self, validator: Validator) -> None:
        assert validator.not_empty(SignupForm(), "form") is False
        assert validator.not_empty(SignupForm(name="a"), "other") is True
        assert validator.errors == {"form": "can't be blank"}

    def test_text_length_counts_characters(self, validator: Validator) -> None:
        assert validator.text_length_in_range("日本語", 1, 3, "name") is True
        assert validator.text_length_in_range("日本語", 1, 2, "name") is False

    def test_matches_default_message_shows_pattern(self, validator: Validator) -> None:
        validator.matches("abc", re.compile(r"^\d+$"), "code")
        assert validator.errors == {"code": r'must match with pattern "^\d+$"'}

    def test_equal(self, validator: Validator) -> None:
        assert validator.equal("yes", "yes", "terms") is True
        assert validator.equal("no", "yes", "terms") is False
        assert validator.errors == {"terms": "must be yes"}

    def test_contains(self, validator: Validator) -> None:
        assert validator.contains("red", ["red", "blue"], "color") is True
        assert validator.contains("pink", ["red", "blue"], "color") is False
        assert validator.errors == {
            "color": "must be one of following values. ['red', 'blue']"
        }

    def test_time_in_range(
        self,
        validator: Validator,
        instants: tuple[datetime.datetime, ...],
    ) -> None:
        t1, t2, t3 = instants
        assert validator.time_in_range(t2, t1, t3, "starts_at") is True
        assert validator.time_in_range(t1, t2, t3, "starts_at") is False
        assert validator.errors == {"starts_at": f"must be between {t2} and {t3}"}


# ══════════════════════════════════════════════════════════════════════
# Messages
# ══════════════════════════════════════════════════════════════════════


class TestMessages:
    def test_custom_message_is_rendered_with_parameters(
        self, validator: Validator
    ) -> None:
        validator.in_range(5, 10, 20, "qty", "expected {}..{}")
        assert validator.errors == {"qty": "expected 10..20"}

    def test_custom_message_without_placeholders(self, validator: Validator) -> None:
        validator.not_empty(None, "name", "name is required")
        assert validator.errors == {"name": "name is required"}

    def test_empty_custom_message_is_used_as_is(self, validator: Validator) -> None:
        validator.not_empty(None, "name", "")
        assert validator.errors == {"name": ""}

    def test_configured_templates(self) -> None:
        validator = Validator(messages=MessageTemplates(not_empty="required"))
        validator.not_empty("", "name")
        assert validator.errors == {"name": "required"}

    def test_broken_custom_message_raises_even_when_rule_passes(
        self, validator: Validator
    ) -> None:
        with pytest.raises(MessageTemplateError):
            validator.in_range(15, 10, 20, "qty", "{} {} {}")
        assert validator.has_errors() is False


# ══════════════════════════════════════════════════════════════════════
# Custom checks
# ══════════════════════════════════════════════════════════════════════


class TestCheck:
    def test_passing_check(self, validator: Validator) -> None:
        assert validator.check(lambda v: True, "password") is True
        assert validator.has_errors() is False

    def test_failing_check_uses_default_message(self, validator: Validator) -> None:
        assert validator.check(lambda v: False, "password") is False
        assert validator.errors == {"password": "is invalid"}

    def test_failing_check_with_message(self, validator: Validator) -> None:
        validator.check(lambda v: False, "password", "too weak")
        assert validator.errors == {"password": "too weak"}

    def test_check_receives_a_separate_validator(self, validator: Validator) -> None:
        received: list[Validator] = []

        def rule(inner: Validator) -> bool:
            received.append(inner)
            return inner.text_length_in_range("abc", 8, 64, "inner_key")

        assert validator.check(rule, "password") is False
        assert received[0] is not validator
        assert received[0].messages is validator.messages
        assert validator.errors == {"password": "is invalid"}

    def test_nested_errors_are_discarded_when_check_passes(
        self, validator: Validator
    ) -> None:
        def rule(inner: Validator) -> bool:
            inner.add_error("inner_key", "ignored")
            return True

        assert validator.check(rule, "password") is True
        assert validator.has_errors() is False

    def test_non_callable_raises(self, validator: Validator) -> None:
        with pytest.raises(InvalidArgumentError):
            validator.check(True, "password")  # type: ignore[arg-type]


# ══════════════════════════════════════════════════════════════════════
# Caller misuse
# ══════════════════════════════════════════════════════════════════════


class TestMisuse:
    def test_invalid_pattern_raises(self, validator: Validator) -> None:
        with pytest.raises(InvalidPatternError):
            validator.matches("abc", "[", "code")
        assert validator.has_errors() is False

    def test_non_integer_range_raises(self, validator: Validator) -> None:
        with pytest.raises(InvalidArgumentError):
            validator.in_range(1.5, 0, 10, "ratio")  # type: ignore[arg-type]
        assert validator.has_errors() is False
