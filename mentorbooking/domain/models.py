"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in mentorbooking/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Self

from mentorbooking.domain.value_objects import (
    Capacity,
    Decision,
    EventId,
    MentorId,
    MentorStatus,
)


def _without(mentors: tuple[str, ...], mentor_id: str) -> tuple[str, ...]:
    return tuple(m for m in mentors if m != mentor_id)


def _with(mentors: tuple[str, ...], mentor_id: str) -> tuple[str, ...]:
    if mentor_id in mentors:
        return mentors
    return (*mentors, mentor_id)


@dataclass(frozen=True)
class MembershipSets:
    """The three per-event mentor sequences.

    A mentor is expected in at most one of them. Transitions return a new
    instance and never mutate in place.
    """

    requesting: tuple[str, ...] = ()
    accepted: tuple[str, ...] = ()
    declined: tuple[str, ...] = ()

    def status_of(self, mentor_id: MentorId) -> MentorStatus:
        # Precedence doubles as the tie-break for corrupt rows.
        if mentor_id.value in self.accepted:
            return MentorStatus.ACCEPTED
        if mentor_id.value in self.requesting:
            return MentorStatus.REQUESTING
        if mentor_id.value in self.declined:
            return MentorStatus.DECLINED
        return MentorStatus.NONE

    def overlapping(self) -> tuple[str, ...]:
        """Return mentors listed in more than one set, in first-seen order."""
        seen: set[str] = set()
        duplicated: list[str] = []
        for mentor in (*self.accepted, *self.requesting, *self.declined):
            if mentor in seen and mentor not in duplicated:
                duplicated.append(mentor)
            seen.add(mentor)
        return tuple(duplicated)

    def with_request(self, mentor_id: MentorId) -> Self:
        return replace(self, requesting=_with(self.requesting, mentor_id.value))

    def with_decision(self, mentor_id: MentorId, decision: Decision) -> Self:
        requesting = _without(self.requesting, mentor_id.value)
        if decision is Decision.APPROVE:
            return replace(
                self,
                requesting=requesting,
                accepted=_with(self.accepted, mentor_id.value),
            )
        return replace(
            self,
            requesting=requesting,
            declined=_with(self.declined, mentor_id.value),
        )

    def with_assignment(self, mentor_id: MentorId) -> Self:
        return MembershipSets(
            requesting=_without(self.requesting, mentor_id.value),
            accepted=_with(self.accepted, mentor_id.value),
            declined=_without(self.declined, mentor_id.value),
        )

    def without_assignment(self, mentor_id: MentorId) -> Self:
        return replace(self, accepted=_without(self.accepted, mentor_id.value))


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    company: str
    starts_at: datetime
    required_mentors: Capacity
    created_at: datetime
    updated_at: datetime
    membership: MembershipSets = field(default_factory=MembershipSets)
    # Mentors invited to see the event; other roles always see it.
    initial_selected_mentors: tuple[str, ...] = ()

    @property
    def is_full(self) -> bool:
        return len(self.membership.accepted) >= self.required_mentors.value

    def is_past(self, now: datetime) -> bool:
        return self.starts_at < now
