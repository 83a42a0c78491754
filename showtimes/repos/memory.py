"""In-memory repositories for rooms, films, sessions and the booking timeline."""

from __future__ import annotations

import threading

from showtimes.domain.models import Film, Room, Session, TimelineEntry


class RoomRepository:
    """Dict-backed store for Room instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Room] = {}

    def add(self, room: Room) -> None:
        self._store[room.id] = room

    def get(self, room_id: str) -> Room | None:
        return self._store.get(room_id)

    def list_all(self) -> list[Room]:
        return list(self._store.values())


class FilmRepository:
    """Dict-backed store for Film instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Film] = {}

    def add(self, film: Film) -> None:
        self._store[film.id] = film

    def get(self, film_id: str) -> Film | None:
        return self._store.get(film_id)

    def list_all(self) -> list[Film]:
        return list(self._store.values())


class SessionRepository:
    """Dict-backed store for Session instances, keyed by id.

    Every method holds the store's lock, and the ``list_*`` methods return
    snapshots, so rooms booked from different threads can share one
    repository. Check-then-insert for a single room still needs the room
    lock held by ``BookingService``.
    """

    def __init__(self) -> None:
        self._store: dict[str, Session] = {}
        self._lock = threading.Lock()

    def add(self, session: Session) -> None:
        with self._lock:
            self._store[session.id] = session

    def get(self, session_id: str) -> Session | None:
        with self._lock:
            return self._store.get(session_id)

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._store.pop(session_id, None)

    def list_all(self) -> list[Session]:
        with self._lock:
            return list(self._store.values())

    def list_for_room(self, room_id: str) -> list[Session]:
        """Return the sessions booked in a room, earliest first."""
        with self._lock:
            held = [s for s in self._store.values() if s.room_id == room_id]
        return sorted(held, key=lambda s: s.start)


class TimelineRepository:
    """List-backed store for TimelineEntry instances, safe to share across threads."""

    def __init__(self) -> None:
        self._entries: list[TimelineEntry] = []
        self._lock = threading.Lock()

    def add(self, entry: TimelineEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def list_for_session(self, session_id: str) -> list[TimelineEntry]:
        with self._lock:
            held = [e for e in self._entries if e.session_id == session_id]
        return sorted(held, key=lambda e: e.timestamp)

    def list_for_room(self, room_id: str) -> list[TimelineEntry]:
        with self._lock:
            held = [e for e in self._entries if e.room_id == room_id]
        return sorted(held, key=lambda e: e.timestamp)
