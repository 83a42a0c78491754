"""Booking workflow: admit sessions into rooms one at a time."""

from __future__ import annotations

import logging
import threading
from collections import defaultdict

from showtimes.domain.bus import EventBus
from showtimes.domain.events import SessionCancelled, SessionRejected, SessionScheduled
from showtimes.domain.models import Session
from showtimes.repos.memory import SessionRepository
from showtimes.services.scheduler import SessionScheduler

logger = logging.getLogger(__name__)


class ScheduleConflictError(ValueError):
    """Raised when a session overlaps sessions already booked in its room."""

    def __init__(self, session: Session, conflicts: list[Session]) -> None:
        self.session = session
        self.conflicts = conflicts
        titles = ", ".join(f"{c.film.title} ({c.id})" for c in conflicts)
        super().__init__(f"Session {session.id} conflicts with: {titles}")


class BookingService:
    """Stores sessions in a room only when they fit around what is already there.

    ``book`` and ``cancel`` hold a per-room lock across the read, the check and
    the write, so two threads booking into the same room cannot both admit
    overlapping sessions. Sessions written to the repository directly bypass
    this guarantee.
    """

    def __init__(self, bus: EventBus, session_repo: SessionRepository) -> None:
        self.bus = bus
        self.session_repo = session_repo
        # one lock per room id seen; entries are never removed
        self._locks: dict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def _room_lock(self, room_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[room_id]

    def _scheduler_for(self, session: Session) -> SessionScheduler:
        return SessionScheduler(
            session.room, self.session_repo.list_for_room(session.room_id)
        )

    def check(self, candidate: Session) -> list[Session]:
        """Return the stored sessions *candidate* would overlap, without booking it."""
        return self._scheduler_for(candidate).conflicts(candidate)

    def book(self, candidate: Session) -> Session:
        with self._room_lock(candidate.room_id):
            scheduler = self._scheduler_for(candidate)
            conflicts = scheduler.conflicts(candidate)
            if not conflicts:
                self.session_repo.add(candidate)

        if conflicts:
            logger.warning(
                "Rejected %s in room %s at %s: overlaps %d session(s)",
                candidate.film.title,
                candidate.room.name,
                candidate.start.isoformat(),
                len(conflicts),
            )
            self.bus.publish(
                SessionRejected(
                    session_id=candidate.id,
                    room_id=candidate.room_id,
                    conflicting_session_ids=[c.id for c in conflicts],
                )
            )
            raise ScheduleConflictError(candidate, conflicts)

        logger.info(
            "Booked %s in room %s at %s",
            candidate.film.title,
            candidate.room.name,
            candidate.start.isoformat(),
        )
        self.bus.publish(
            SessionScheduled(session_id=candidate.id, room_id=candidate.room_id)
        )
        return candidate

    def cancel(self, session_id: str) -> None:
        stored = self.session_repo.get(session_id)
        if stored is None:
            raise KeyError(session_id)
        with self._room_lock(stored.room_id):
            if self.session_repo.get(session_id) is None:
                raise KeyError(session_id)
            self.session_repo.delete(session_id)
        logger.info("Cancelled session %s in room %s", session_id, stored.room.name)
        self.bus.publish(SessionCancelled(session_id=session_id, room_id=stored.room_id))
