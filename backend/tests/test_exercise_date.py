from datetime import datetime, timezone, timedelta

import pytest

from domain.value_objects import ExerciseDate


def test_bare_date_is_midnight_utc():
    date = ExerciseDate.parse("2024-01-01")
    assert date.value == datetime(2024, 1, 1)


def test_calendar_and_timestamp_renderings_differ():
    date = ExerciseDate.parse("2024-01-01")
    assert date.to_calendar_string() == "Mon Jan 01 2024"
    assert date.to_timestamp_string() == "2024-01-01T00:00:00.000Z"
    assert str(date) == date.to_timestamp_string()


def test_timestamp_keeps_milliseconds():
    date = ExerciseDate(datetime(2023, 7, 4, 18, 5, 9, 123456))
    assert date.to_timestamp_string() == "2023-07-04T18:05:09.123Z"
    assert date.to_calendar_string() == "Tue Jul 04 2023"


@pytest.mark.parametrize("raw,expected", [
    ("2024-03-10T12:00:00Z", datetime(2024, 3, 10, 12, 0)),
    ("2024-03-10T12:00:00+02:00", datetime(2024, 3, 10, 10, 0)),
    ("2024-03-10T12:00:00", datetime(2024, 3, 10, 12, 0)),
    ("  2024-03-10 ", datetime(2024, 3, 10)),
])
def test_parse_normalizes_to_naive_utc(raw, expected):
    assert ExerciseDate.parse(raw).value == expected


def test_aware_datetime_is_converted():
    aware = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=3)))
    assert ExerciseDate(aware).value == datetime(2023, 12, 31, 22, 0)


@pytest.mark.parametrize("raw", ["abc", "2024-02-30", "2024-13-01", "", "   "])
def test_parse_rejects_invalid_dates(raw):
    with pytest.raises(ValueError):
        ExerciseDate.parse(raw)


@pytest.mark.parametrize("raw", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"])
def test_parse_offset_past_supported_range(raw):
    with pytest.raises(OverflowError):
        ExerciseDate.parse(raw)
