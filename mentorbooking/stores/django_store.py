"""Django ORM implementation of the EventStore."""

import logging

from django.db import DatabaseError, transaction

from mentorbooking import models
from mentorbooking.domain import Capacity, Event, EventId, MembershipSets
from mentorbooking.domain.errors import StoreUnavailableError
from mentorbooking.stores.interfaces import EventStore, MembershipMutation

logger = logging.getLogger(__name__)


def _to_domain(row: models.Event) -> Event:
    membership = MembershipSets(
        requesting=tuple(row.requesting_mentors or ()),
        accepted=tuple(row.accepted_mentors or ()),
        declined=tuple(row.declined_mentors or ()),
    )
    overlapping = membership.overlapping()
    if overlapping:
        logger.warning(
            "Event %s lists mentors in more than one set: %s", row.pk, ", ".join(overlapping)
        )
    return Event(
        id=EventId(value=row.pk),
        title=row.title,
        company=row.company,
        starts_at=row.starts_at,
        required_mentors=Capacity(row.required_mentors),
        created_at=row.created_at,
        updated_at=row.updated_at,
        membership=membership,
        initial_selected_mentors=tuple(row.initial_selected_mentors or ()),
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM.

    Membership mutations lock the event row for the duration of the
    transaction, so concurrent writers are serialized per event.
    """

    def list_events(self) -> list[Event]:
        try:
            return [_to_domain(row) for row in models.Event.objects.order_by("starts_at")]
        except DatabaseError as exc:
            raise StoreUnavailableError() from exc

    def get_event(self, event_id: EventId) -> Event | None:
        try:
            row = models.Event.objects.filter(pk=event_id.value).first()
        except DatabaseError as exc:
            raise StoreUnavailableError() from exc
        return _to_domain(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        try:
            return models.Event.objects.filter(pk=event_id.value).exists()
        except DatabaseError as exc:
            raise StoreUnavailableError() from exc

    def mutate_membership(
        self, event_id: EventId, mutation: MembershipMutation
    ) -> Event | None:
        try:
            with transaction.atomic():
                row = (
                    models.Event.objects.select_for_update()
                    .filter(pk=event_id.value)
                    .first()
                )
                if row is None:
                    return None
                current = _to_domain(row)
                updated = mutation(current)
                if updated == current.membership:
                    return current
                row.requesting_mentors = list(updated.requesting)
                row.accepted_mentors = list(updated.accepted)
                row.declined_mentors = list(updated.declined)
                row.save(
                    update_fields=[
                        "requesting_mentors",
                        "accepted_mentors",
                        "declined_mentors",
                        "updated_at",
                    ]
                )
                return _to_domain(row)
        except DatabaseError as exc:
            raise StoreUnavailableError() from exc
