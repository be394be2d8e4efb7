"""Event service - read-side business logic.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from collections.abc import Iterable

from mentorbooking.domain import Caller, Event, EventId, MentorId
from mentorbooking.domain.errors import (
    EventNotFoundError,
    InvalidEventIdError,
    InvalidMentorIdError,
    NotAuthorizedError,
)
from mentorbooking.domain.projections import (
    can_view,
    events_requested_by,
    events_with_pending_requests,
    visible_events,
)
from mentorbooking.stores.interfaces import EventStore


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def parse_mentor_id(mentor_id: str) -> MentorId:
    try:
        return MentorId(mentor_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidMentorIdError() from exc


class EventService:
    """Service for event catalog reads."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def visible_to(self, caller: Caller, events: Iterable[Event]) -> list[Event]:
        """Drop events the caller is not allowed to see."""
        return visible_events(events, caller)

    def ensure_visible(self, caller: Caller, event: Event) -> Event:
        """Return the event, or hide it behind EventNotFoundError.

        Mentors that were not selected for an event get the same answer as
        for a missing one.
        """
        if not can_view(event, caller):
            raise EventNotFoundError(str(event.id))
        return event

    def pending_requests(self, caller: Caller) -> list[Event]:
        """Return events that have mentors waiting for a decision.

        Raises:
            NotAuthorizedError: If the caller cannot view pending requests.
        """
        if not caller.capabilities.can_view_pending_requests:
            raise NotAuthorizedError("view pending requests")
        return events_with_pending_requests(self._store.list_events())

    def requested_by(self, caller: Caller) -> list[Event]:
        """Return events where the caller has an open request."""
        events = visible_events(self._store.list_events(), caller)
        return events_requested_by(events, parse_mentor_id(caller.viewer_id))

    def integrity_report(self, caller: Caller) -> list[Event]:
        """Return events whose membership sets overlap.

        Raises:
            NotAuthorizedError: If the caller cannot view admin data.
        """
        if not caller.capabilities.can_view_admin_data:
            raise NotAuthorizedError("view admin data")
        return [event for event in self._store.list_events() if event.membership.overlapping()]
