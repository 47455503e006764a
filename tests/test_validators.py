import uuid
from datetime import datetime, timedelta, timezone

import pytest

from utils.errors import InvalidDeadlineFormat, InvalidIdFormat
from utils.validators import ensure_valid_id, is_valid_id, parse_deadline


def test_generated_ids_are_valid():
    assert is_valid_id(str(uuid.uuid4()))
    assert is_valid_id(str(uuid.uuid4()).upper())
    assert is_valid_id("00000000-0000-0000-0000-000000000000")


@pytest.mark.parametrize("value", [
    "not-a-uuid",
    "",
    None,
    42,
    "3fa85f645717-4562-b3fc-2c963f66afa6",
    "3fa85f64-5717-0562-b3fc-2c963f66afa6",  # version 0
    "3fa85f64-5717-4562-73fc-2c963f66afa6",  # bad variant
])
def test_invalid_ids(value):
    assert is_valid_id(value) is False
    with pytest.raises(InvalidIdFormat):
        ensure_valid_id(value)


def test_parse_date_only_deadline():
    assert parse_deadline("2024-01-01") == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_parse_zulu_deadline():
    assert parse_deadline("2024-01-01T10:30:00Z") == datetime(2024, 1, 1, 10, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("value, microsecond", [
    ("2024-01-01T10:30:00.5Z", 500000),
    ("2024-01-01T10:30:00.25Z", 250000),
    ("2024-01-01T10:30:00.1234Z", 123400),
    ("2024-01-01T10:30:00.123Z", 123000),
])
def test_parse_fractional_seconds(value, microsecond):
    assert parse_deadline(value) == datetime(2024, 1, 1, 10, 30, 0, microsecond, tzinfo=timezone.utc)


def test_parse_offset_deadline_keeps_offset():
    parsed = parse_deadline("2024-01-01T10:30:00+02:00")

    assert parsed.utcoffset() == timedelta(hours=2)


@pytest.mark.parametrize("value", ["", "   ", "tomorrow", "2024-13-01", None, 20240101])
def test_invalid_deadlines(value):
    with pytest.raises(InvalidDeadlineFormat):
        parse_deadline(value)
