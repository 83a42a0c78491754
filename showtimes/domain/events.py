"""Domain events emitted while booking sessions into rooms."""

from __future__ import annotations

from pydantic import BaseModel


class SessionScheduled(BaseModel):
    """Fired when a session has been admitted and stored."""

    session_id: str
    room_id: str


class SessionRejected(BaseModel):
    """Fired when a session overlaps sessions already booked in its room."""

    session_id: str
    room_id: str
    conflicting_session_ids: list[str]


class SessionCancelled(BaseModel):
    """Fired when a stored session is removed from its room."""

    session_id: str
    room_id: str
