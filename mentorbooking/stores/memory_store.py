"""In-process EventStore, for tests and single-process tooling."""

import threading
from dataclasses import replace

from mentorbooking.domain import Event, EventId
from mentorbooking.stores.interfaces import EventStore, MembershipMutation


class InMemoryEventStore(EventStore):
    """Dict-backed store; one lock serializes all membership mutations."""

    def __init__(self, events: list[Event] | None = None) -> None:
        self._lock = threading.Lock()
        self._events: dict[EventId, Event] = {event.id: event for event in events or ()}

    def add(self, event: Event) -> None:
        with self._lock:
            self._events[event.id] = event

    def list_events(self) -> list[Event]:
        with self._lock:
            return sorted(self._events.values(), key=lambda event: event.starts_at)

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        with self._lock:
            return event_id in self._events

    def mutate_membership(
        self, event_id: EventId, mutation: MembershipMutation
    ) -> Event | None:
        with self._lock:
            current = self._events.get(event_id)
            if current is None:
                return None
            membership = mutation(current)
            if membership == current.membership:
                return current
            updated = replace(current, membership=membership)
            self._events[event_id] = updated
            return updated
