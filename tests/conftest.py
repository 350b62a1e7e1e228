"""Shared test fixtures."""

from datetime import datetime

import pytest

from pykhronos.timestamp import Timestamp


@pytest.fixture
def some_date():
    return Timestamp.from_datetime(datetime(2001, 2, 15, 12, 34, 56), 123_456_789)


@pytest.fixture
def epoch_base():
    return Timestamp.from_datetime(datetime(2000, 1, 1))
