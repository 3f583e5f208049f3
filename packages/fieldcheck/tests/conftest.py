"""Shared fixtures for fieldcheck tests."""

from __future__ import annotations

import datetime

import pytest

from fieldcheck.validator import Validator


@pytest.fixture
def validator() -> Validator:
    """A fresh validator with the default messages."""
    return Validator()


@pytest.fixture
def instants() -> tuple[datetime.datetime, datetime.datetime, datetime.datetime]:
    """Three ascending UTC instants one day apart."""
    t1 = datetime.datetime(2024, 3, 1, 12, 0, tzinfo=datetime.timezone.utc)
    return t1, t1 + datetime.timedelta(days=1), t1 + datetime.timedelta(days=2)
