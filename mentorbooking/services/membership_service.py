"""Membership service - the mentor request/decision lifecycle.

Every operation checks the caller's capabilities before touching the store,
then hands a pure mutation to ``EventStore.mutate_membership`` so the
read-check-write runs as one atomic step against committed state. Errors
raised inside a mutation abort it without writing.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from mentorbooking.domain import (
    Caller,
    Decision,
    Event,
    MembershipSets,
    MentorId,
    MentorStatus,
)
from mentorbooking.domain.errors import (
    ConflictingStateError,
    EventClosedError,
    EventNotFoundError,
    NotAuthorizedError,
    RequestNotFoundError,
)
from mentorbooking.domain.projections import can_view
from mentorbooking.services.event_service import parse_event_id, parse_mentor_id
from mentorbooking.stores.interfaces import EventStore, MembershipMutation

logger = logging.getLogger(__name__)


class MembershipService:
    """Request, decide, assign and unassign mentors on events."""

    def __init__(
        self, store: EventStore, clock: Callable[[], datetime] = timezone.now
    ) -> None:
        self._store = store
        self._clock = clock

    def request_membership(self, caller: Caller, event_id: str, mentor_id: str) -> Event:
        """Add the caller to the event's requesting mentors.

        Requesting again while already requesting is a no-op.

        Raises:
            NotAuthorizedError: If the caller cannot request, or requests
                on behalf of another mentor.
            ConflictingStateError: If the mentor was already accepted or declined.
            EventClosedError: If the event has started or is fully staffed.
            EventNotFoundError: If the event does not exist or the caller
                was not selected for it.
        """
        mentor = parse_mentor_id(mentor_id)
        if not caller.capabilities.can_request_to_mentor or caller.viewer_id != mentor.value:
            raise NotAuthorizedError("request to mentor this event")
        now = self._clock()

        def mutation(event: Event) -> MembershipSets:
            if not can_view(event, caller):
                raise EventNotFoundError(event_id)
            status = event.membership.status_of(mentor)
            if status is MentorStatus.REQUESTING:
                logger.debug("Mentor %s already requesting event %s", mentor, event.id)
                return event.membership
            if status is not MentorStatus.NONE:
                raise ConflictingStateError(event_id, mentor.value, status.value)
            if event.is_past(now):
                raise EventClosedError(event_id, "event has already started")
            if event.is_full:
                raise EventClosedError(event_id, "all mentor slots are filled")
            return event.membership.with_request(mentor)

        updated, changed = self._mutate(event_id, mutation)
        if changed:
            logger.info("Mentor %s requested event %s", mentor, event_id)
        return updated

    def decide_membership(
        self, caller: Caller, event_id: str, mentor_id: str, decision: Decision
    ) -> Event:
        """Move a requesting mentor to accepted or declined.

        Raises:
            NotAuthorizedError: If the caller cannot decide mentor requests.
            RequestNotFoundError: If the mentor is not currently requesting.
            EventNotFoundError: If the event does not exist.
        """
        if not caller.capabilities.can_decide_mentor_requests:
            raise NotAuthorizedError("decide mentor requests")
        mentor = parse_mentor_id(mentor_id)

        def mutation(event: Event) -> MembershipSets:
            if mentor.value not in event.membership.requesting:
                raise RequestNotFoundError(event_id, mentor.value)
            return event.membership.with_decision(mentor, decision)

        updated, _ = self._mutate(event_id, mutation)
        logger.info(
            "Request by mentor %s for event %s: %s by %s",
            mentor,
            event_id,
            decision.value,
            caller.viewer_id,
        )
        return updated

    def assign(self, caller: Caller, event_id: str, mentor_id: str) -> Event:
        """Accept a mentor directly, bypassing the request flow.

        Raises:
            NotAuthorizedError: If the caller cannot assign mentors.
            EventNotFoundError: If the event does not exist.
        """
        if not caller.capabilities.can_assign_mentors:
            raise NotAuthorizedError("assign mentors")
        mentor = parse_mentor_id(mentor_id)
        updated, changed = self._mutate(
            event_id, lambda event: event.membership.with_assignment(mentor)
        )
        if changed:
            logger.info("Mentor %s assigned to event %s by %s", mentor, event_id, caller.viewer_id)
        return updated

    def unassign(self, caller: Caller, event_id: str, mentor_id: str) -> Event:
        """Remove a mentor from the accepted set only.

        Raises:
            NotAuthorizedError: If the caller cannot assign mentors.
            EventNotFoundError: If the event does not exist.
        """
        if not caller.capabilities.can_assign_mentors:
            raise NotAuthorizedError("unassign mentors")
        mentor = parse_mentor_id(mentor_id)
        updated, changed = self._mutate(
            event_id, lambda event: event.membership.without_assignment(mentor)
        )
        if changed:
            logger.info("Mentor %s removed from event %s by %s", mentor, event_id, caller.viewer_id)
        return updated

    def _mutate(self, event_id: str, mutation: MembershipMutation) -> tuple[Event, bool]:
        """Apply the mutation and report whether it changed the membership."""
        before: list[MembershipSets] = []

        def recording(event: Event) -> MembershipSets:
            before.append(event.membership)
            return mutation(event)

        updated = self._store.mutate_membership(parse_event_id(event_id), recording)
        if updated is None:
            raise EventNotFoundError(event_id)
        return updated, updated.membership != before[-1]
