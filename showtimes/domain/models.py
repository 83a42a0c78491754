"""Domain models for cinema rooms, films and scheduled sessions."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from showtimes.services.intervals import anchor, as_duration, end_time


class TimelineEntryType(StrEnum):
    SCHEDULED = "scheduled"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Room(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str


class Film(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str
    duration: timedelta
    genre: str | None = None

    @field_validator("duration", mode="before")
    @classmethod
    def _minutes(cls, value: object) -> object:
        try:
            return as_duration(value)
        except TypeError:
            # let pydantic report anything else (e.g. ISO 8601 strings)
            return value

    @field_validator("duration")
    @classmethod
    def _non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value


class Session(BaseModel):
    """One showing of a film in a room.

    ``start`` is always a full datetime. Bare wall-clock times (``time``
    objects or strings such as ``"22:30"``) are pinned to
    ``DEFAULT_SHOW_DATE`` so that sessions crossing midnight still order
    correctly against each other.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    start: datetime
    film: Film
    room: Room

    @field_validator("start", mode="before")
    @classmethod
    def _anchor_start(cls, value: object) -> datetime:
        try:
            return anchor(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("start")
    @classmethod
    def _naive_start(cls, value: datetime) -> datetime:
        # naive and aware datetimes cannot be ordered against each other
        if value.tzinfo is not None:
            raise ValueError("start must not carry a timezone")
        return value

    @property
    def end(self) -> datetime:
        return end_time(self.start, self.film.duration)

    @property
    def room_id(self) -> str:
        return self.room.id


class TimelineEntry(BaseModel):
    id: str = Field(default_factory=_new_id)
    session_id: str
    room_id: str
    timestamp: datetime = Field(default_factory=_utcnow)
    type: TimelineEntryType
    payload: dict = Field(default_factory=dict)
