"""Tests for the Film / Room / Session domain models."""

from datetime import datetime, time, timedelta, timezone

import pytest
from pydantic import ValidationError

from showtimes.domain.models import Film, Room, Session
from showtimes.services.intervals import DEFAULT_SHOW_DATE


@pytest.fixture()
def room() -> Room:
    return Room(name="Eldorado - IMAX")


@pytest.fixture()
def film() -> Film:
    return Film(title="Rogue One", duration=timedelta(minutes=133), genre="SCI-FI")


def test_film_duration_accepts_minutes():
    assert Film(title="Short", duration=15).duration == timedelta(minutes=15)


def test_film_duration_accepts_iso_strings():
    assert Film(title="Short", duration="PT1H30M").duration == timedelta(minutes=90)


def test_negative_duration_is_refused():
    with pytest.raises(ValidationError, match="must not be negative"):
        Film(title="Backwards", duration=-10)


def test_missing_duration_is_refused():
    with pytest.raises(ValidationError):
        Film(title="Untimed")


def test_zero_duration_is_allowed():
    assert Film(title="Trailer", duration=0).duration == timedelta(0)


def test_session_end_is_start_plus_film_duration(film, room):
    session = Session(start=datetime(2025, 3, 1, 20, 0), film=film, room=room)
    assert session.end == datetime(2025, 3, 1, 22, 13)
    assert session.room_id == room.id


def test_session_pins_bare_times_to_default_day(film, room):
    session = Session(start=time(22, 30), film=film, room=room)
    assert session.start == datetime.combine(DEFAULT_SHOW_DATE, time(22, 30))
    assert session.end.date() > session.start.date()


def test_session_parses_clock_strings(film, room):
    session = Session(start="10:00", film=film, room=room)
    assert session.start.time() == time(10, 0)


def test_session_refuses_unparsable_start(film, room):
    with pytest.raises(ValidationError):
        Session(start="someday", film=film, room=room)


def test_session_is_immutable(film, room):
    session = Session(start="10:00", film=film, room=room)
    with pytest.raises(ValidationError):
        session.start = datetime(2025, 3, 1, 11, 0)


def test_each_entity_gets_its_own_id(film, room):
    first = Session(start="10:00", film=film, room=room)
    second = Session(start="10:00", film=film, room=room)
    assert first.id != second.id


@pytest.mark.parametrize(
    "start",
    [
        "2000-01-01 10:00+00:00",
        datetime(2000, 1, 1, 10, 0, tzinfo=timezone.utc),
    ],
)
def test_session_refuses_timezone_aware_start(film, room, start):
    """Aware starts cannot be compared with the naive ones every other session has."""
    with pytest.raises(ValidationError, match="must not carry a timezone"):
        Session(start=start, film=film, room=room)


@pytest.mark.parametrize("start", [36000, 36000.0, None, [10, 0]])
def test_session_refuses_non_time_start(film, room, start):
    with pytest.raises(ValidationError):
        Session(start=start, film=film, room=room)
