"""Tests for duration helpers."""

from datetime import timedelta

from podchapters.timecode import (
    duration_to_ms,
    duration_to_seconds,
    format_timestamp,
    seconds_to_duration,
    split_duration,
)


def test_seconds_to_duration_keeps_milliseconds():
    assert seconds_to_duration(45) == timedelta(seconds=45)
    assert seconds_to_duration(130.5) == timedelta(milliseconds=130500)
    assert seconds_to_duration(1.9999) == timedelta(milliseconds=1999)


def test_seconds_to_duration_truncates_toward_zero():
    assert seconds_to_duration(-1.9999) == timedelta(milliseconds=-1999)


def test_duration_to_ms():
    assert duration_to_ms(timedelta(seconds=10, milliseconds=400)) == 10400
    assert duration_to_ms(timedelta(microseconds=1999)) == 1
    assert duration_to_ms(timedelta(milliseconds=-5)) == -5


def test_duration_to_seconds_integer_or_float():
    whole = duration_to_seconds(timedelta(seconds=45))
    assert whole == 45
    assert isinstance(whole, int)

    fractional = duration_to_seconds(timedelta(milliseconds=130500))
    assert fractional == 130.5
    assert isinstance(fractional, float)

    assert duration_to_seconds(timedelta(milliseconds=10400)) == 10.4
    assert duration_to_seconds(timedelta(0)) == 0


def test_split_duration():
    assert split_duration(timedelta(seconds=3661)) == (1, 1, 1)
    assert split_duration(timedelta(seconds=598)) == (0, 9, 58)
    assert split_duration(timedelta(seconds=-30)) == (0, 0, 0)


def test_format_timestamp():
    assert format_timestamp(timedelta(seconds=304)) == "05:04"
    assert format_timestamp(timedelta(seconds=304), with_hours=True) == "00:05:04"
    assert format_timestamp(timedelta(hours=2, seconds=5), with_hours=True) == "02:00:05"
    assert format_timestamp(timedelta(milliseconds=-1)) == "00:00"
