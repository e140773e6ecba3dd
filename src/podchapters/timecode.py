"""Duration helpers shared by the chapter codecs."""

from __future__ import annotations

from datetime import timedelta

ONE_HOUR = timedelta(hours=1)
_ONE_MS = timedelta(milliseconds=1)


def ms_to_duration(ms: int) -> timedelta:
    """Build a duration from a millisecond count."""
    return timedelta(milliseconds=ms)


def seconds_to_duration(seconds: float) -> timedelta:
    """Convert fractional seconds to a duration at millisecond precision.

    The millisecond count is truncated toward zero, so 1.9999 becomes
    1999 ms and -1.9999 becomes -1999 ms.
    """
    # Rounding to 1e-6 ms first absorbs float noise such as 3600.005 * 1000
    # landing on 3600004.9999999995
    return ms_to_duration(int(round(seconds * 1000, 6)))


def duration_to_ms(duration: timedelta) -> int:
    """Whole milliseconds in a duration, truncated toward zero."""
    ms = duration / _ONE_MS
    return int(ms)


def duration_to_seconds(duration: timedelta) -> int | float:
    """Seconds for serialization: an int when whole, else a float.

    Examples:
        45 s     -> 45
        130.5 s  -> 130.5
        10.4 s   -> 10.4
    """
    ms = duration_to_ms(duration)
    if ms % 1000 == 0:
        return ms // 1000
    return round(ms / 1000, 3)


def split_duration(duration: timedelta) -> tuple[int, int, int]:
    """Split a duration into (hours, minutes, seconds).

    Negative durations are clamped to zero.
    """
    total_seconds = max(0, duration_to_ms(duration)) // 1000
    hours = total_seconds // 3600
    minutes = total_seconds // 60 - hours * 60
    seconds = total_seconds - minutes * 60 - hours * 3600
    return hours, minutes, seconds


def format_timestamp(duration: timedelta, with_hours: bool = False) -> str:
    """Format a duration as MM:SS or HH:MM:SS."""
    hours, minutes, seconds = split_duration(duration)
    if with_hours:
        return "{:02d}:{:02d}:{:02d}".format(hours, minutes, seconds)
    # Minutes keep counting past 59 when the caller asks for MM:SS
    return "{:02d}:{:02d}".format(hours * 60 + minutes, seconds)
