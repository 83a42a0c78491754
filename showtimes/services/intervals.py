"""Time arithmetic shared by the scheduler and the domain models."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from dateutil import parser as date_parser

# Calendar day that bare wall-clock times are pinned to when no day is given.
DEFAULT_SHOW_DATE = date(2000, 1, 1)


def anchor(value: datetime | time | str, on: date = DEFAULT_SHOW_DATE) -> datetime:
    """Return *value* as a full datetime.

    A ``time`` is combined with *on*. A string is parsed with dateutil, using
    *on* to fill in any missing date fields, so ``"22:30"`` and
    ``"2025-03-01 22:30"`` are both accepted.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, time):
        return datetime.combine(on, value)
    if isinstance(value, str):
        try:
            return date_parser.parse(value, default=datetime.combine(on, time()))
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unrecognised show time: {value!r}") from exc
    raise TypeError(f"Cannot anchor {type(value).__name__} to a show time")


def as_duration(value: timedelta | int | float) -> timedelta:
    """Read plain numbers as minutes."""
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        raise TypeError("Duration cannot be a boolean")
    if isinstance(value, (int, float)):
        return timedelta(minutes=value)
    raise TypeError(f"Cannot read {type(value).__name__} as a duration")


def end_time(start: datetime, duration: timedelta) -> datetime:
    """Return when something starting at *start* and lasting *duration* finishes.

    The result may fall on the day after *start*.
    """
    return start + duration
