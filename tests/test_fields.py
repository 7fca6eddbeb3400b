"""Tests for field gates and duration helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from pulsegate.scheduler.fields import (
    DAY_MS,
    HOUR_MS,
    MINUTE_MS,
    MONTH_MS,
    CalendarField,
    FieldGate,
    format_duration,
    to_utc,
)


# Friday
INSTANT = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize("field,value", [
    (CalendarField.MINUTE, 30),
    (CalendarField.HOUR, 10),
    (CalendarField.DAY_OF_MONTH, 15),
    (CalendarField.MONTH, 3),
    (CalendarField.DAY_OF_WEEK, 6),
])
def test_field_values(field, value):
    assert FieldGate.build(field, "*").value(INSTANT) == value


@pytest.mark.parametrize("day,weekday", [
    (17, 1),  # Sunday
    (18, 2),  # Monday
    (15, 6),  # Friday
    (23, 7),  # Saturday
])
def test_day_of_week_counts_from_sunday(day, weekday):
    gate = FieldGate.build(CalendarField.DAY_OF_WEEK, "*")
    assert gate.value(datetime(2024, 3, day, tzinfo=timezone.utc)) == weekday


def test_day_of_month_is_one_based():
    gate = FieldGate.build(CalendarField.DAY_OF_MONTH, "1")
    assert gate.matches(datetime(2024, 3, 1, tzinfo=timezone.utc))
    assert gate.distance(datetime(2024, 3, 1, tzinfo=timezone.utc)) == 0


@pytest.mark.parametrize("field,spec,expected", [
    (CalendarField.MINUTE, "0", 30 * MINUTE_MS),
    (CalendarField.HOUR, "0", 10 * HOUR_MS),
    (CalendarField.DAY_OF_MONTH, "1", 14 * DAY_MS),
    (CalendarField.MONTH, "1", 2 * MONTH_MS),
    (CalendarField.DAY_OF_WEEK, "0", 6 * DAY_MS),
])
def test_distance_is_scaled_to_milliseconds(field, spec, expected):
    gate = FieldGate.build(field, spec)
    assert not gate.matches(INSTANT)
    assert gate.distance(INSTANT) == expected


def test_scales():
    assert MINUTE_MS == 60_000
    assert HOUR_MS == 3_600_000
    assert DAY_MS == 86_400_000
    assert MONTH_MS == 30 * 86_400_000


def test_matching_field_has_zero_distance():
    gate = FieldGate.build(CalendarField.MINUTE, "15,30")
    assert gate.matches(INSTANT)
    assert gate.distance(INSTANT) == 0


def test_to_utc_treats_naive_as_utc():
    naive = datetime(2024, 3, 15, 10, 30)
    assert to_utc(naive) == INSTANT
    assert to_utc(naive).tzinfo is timezone.utc


def test_to_utc_converts_other_zones():
    local = datetime(2024, 3, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
    converted = to_utc(local)
    assert converted.hour == 10
    assert FieldGate.build(CalendarField.HOUR, "10").matches(local)


@pytest.mark.parametrize("millis,text", [
    (0, "0ms"),
    (-5, "0ms"),
    (1, "1ms"),
    (1500, "1s 500ms"),
    (MINUTE_MS, "1min"),
    (2 * HOUR_MS + 5 * MINUTE_MS, "2h 5min"),
    (6_431_400_000, "74d 10h 30min"),
])
def test_format_duration(millis, text):
    assert format_duration(millis) == text
