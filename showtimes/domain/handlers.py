"""Domain-event handlers that keep the booking timeline up to date."""

from __future__ import annotations

from showtimes.domain.bus import EventBus
from showtimes.domain.events import SessionCancelled, SessionRejected, SessionScheduled
from showtimes.domain.models import TimelineEntry, TimelineEntryType
from showtimes.repos.memory import TimelineRepository


class HandlerRegistry:
    """Wires booking-event handlers to the bus."""

    def __init__(self, bus: EventBus, timeline_repo: TimelineRepository) -> None:
        self.bus = bus
        self.timeline_repo = timeline_repo
        self._register()

    def _register(self) -> None:
        self.bus.subscribe(SessionScheduled, self.on_session_scheduled)
        self.bus.subscribe(SessionRejected, self.on_session_rejected)
        self.bus.subscribe(SessionCancelled, self.on_session_cancelled)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def on_session_scheduled(self, event: SessionScheduled) -> None:
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                room_id=event.room_id,
                type=TimelineEntryType.SCHEDULED,
            )
        )

    def on_session_rejected(self, event: SessionRejected) -> None:
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                room_id=event.room_id,
                type=TimelineEntryType.REJECTED,
                payload={"conflicting_session_ids": event.conflicting_session_ids},
            )
        )

    def on_session_cancelled(self, event: SessionCancelled) -> None:
        self.timeline_repo.add(
            TimelineEntry(
                session_id=event.session_id,
                room_id=event.room_id,
                type=TimelineEntryType.CANCELLED,
            )
        )
