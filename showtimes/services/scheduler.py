"""Admission checks for sessions competing for the same room."""

from __future__ import annotations

from collections.abc import Iterable

from showtimes.domain.models import Room, Session


def _clashes(existing: Session, candidate: Session) -> bool:
    # back-to-back (one ends exactly as the other starts) is allowed
    if candidate.start < existing.start:
        return not candidate.end <= existing.start
    return not existing.end <= candidate.start


class SessionScheduler:
    """Decides whether a candidate session fits around a room's existing sessions.

    The caller is responsible for passing only the sessions already booked in
    *room*; a session from any other room is rejected with ``ValueError``.
    The scheduler keeps its own snapshot of the sessions and never mutates it,
    so checking a candidate and then storing it are two separate steps. Callers
    that admit sessions concurrently must hold a lock around both (see
    ``BookingService``).
    """

    def __init__(self, room: Room, sessions: Iterable[Session] = ()) -> None:
        self.room = room
        held = tuple(sessions)
        foreign = [s.id for s in held if s.room_id != room.id]
        if foreign:
            raise ValueError(
                f"Sessions {', '.join(foreign)} do not belong to room {room.id}"
            )
        self._sessions = held

    @property
    def sessions(self) -> list[Session]:
        return sorted(self._sessions, key=lambda s: s.start)

    def fits(self, candidate: Session) -> bool:
        """Return True if *candidate* overlaps none of the room's sessions."""
        return not any(_clashes(existing, candidate) for existing in self._sessions)

    def conflicts(self, candidate: Session) -> list[Session]:
        """Return the existing sessions *candidate* overlaps, earliest first."""
        return [s for s in self.sessions if _clashes(s, candidate)]
