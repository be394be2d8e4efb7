"""Read-side projections over events and their membership sets.

Everything here is pure: no store access, no clock unless passed in.
"""

from collections.abc import Iterable
from datetime import datetime

from mentorbooking.domain.models import Event
from mentorbooking.domain.permissions import Caller
from mentorbooking.domain.value_objects import MentorId, MentorStatus


def project_status(event: Event, mentor_id: MentorId) -> MentorStatus:
    """Return the mentor's relationship to the event.

    Accepted wins over requesting, which wins over declined. The order only
    matters for rows that break the exclusivity invariant.
    """
    return event.membership.status_of(mentor_id)


def pending_request_count(event: Event) -> int:
    return len(event.membership.requesting)


def accepted_count(event: Event) -> int:
    return len(event.membership.accepted)


def open_slots(event: Event) -> int:
    return max(event.required_mentors.value - accepted_count(event), 0)


def can_view(event: Event, caller: Caller) -> bool:
    """Mentors see only events they were selected for; other roles see all."""
    if not caller.is_mentor:
        return True
    return caller.viewer_id in event.initial_selected_mentors


def visible_events(events: Iterable[Event], caller: Caller) -> list[Event]:
    return [event for event in events if can_view(event, caller)]


def can_request(event: Event, caller: Caller, now: datetime) -> bool:
    """Whether the request control should be offered to the caller."""
    if not caller.capabilities.can_request_to_mentor or not can_view(event, caller):
        return False
    if project_status(event, MentorId(caller.viewer_id)) is not MentorStatus.NONE:
        return False
    return not event.is_past(now) and not event.is_full


def events_requested_by(events: Iterable[Event], mentor_id: MentorId) -> list[Event]:
    """Events where the mentor has a pending request."""
    return [
        event
        for event in events
        if project_status(event, mentor_id) is MentorStatus.REQUESTING
    ]


def events_with_pending_requests(events: Iterable[Event]) -> list[Event]:
    return [event for event in events if event.membership.requesting]


def accepted_event_ids(events: Iterable[Event], mentor_id: MentorId) -> list[str]:
    """IDs of events that list the mentor as accepted, in event order."""
    return [
        str(event.id) for event in events if mentor_id.value in event.membership.accepted
    ]
