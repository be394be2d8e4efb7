"""Unit tests for EventService and MembershipService.

These test authorization, transition rules and domain error mapping
against the in-memory store.
Run with: pytest tests/test_services.py -v
"""

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta

import pytest

from mentorbooking.domain import Decision, MembershipSets, Role
from mentorbooking.domain.errors import (
    ConflictingStateError,
    EventClosedError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidMentorIdError,
    NotAuthorizedError,
    RequestNotFoundError,
)
from mentorbooking.services.event_service import EventService
from mentorbooking.services.membership_service import MembershipService
from mentorbooking.stores.memory_store import InMemoryEventStore


@pytest.fixture
def store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def service(store) -> MembershipService:
    return MembershipService(store)


@pytest.fixture
def add_event(store, make_event):
    def _add(**kwargs):
        event = make_event(**kwargs)
        store.add(event)
        return str(event.id)

    return _add


def _membership(store, event_id: str) -> MembershipSets:
    return next(e for e in store.list_events() if str(e.id) == event_id).membership


class TestRequestMembership:
    """Tests for MembershipService.request_membership."""

    def test_adds_mentor_to_requesting(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m0"])
        event = service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m1")
        assert event.membership.requesting == ("m0", "m1")

    def test_second_request_is_idempotent(self, service, store, add_event, make_caller):
        """Requesting twice leaves the same state as requesting once."""
        event_id = add_event()
        caller = make_caller(Role.MENTOR, "m1")
        once = service.request_membership(caller, event_id, "m1")
        twice = service.request_membership(caller, event_id, "m1")
        assert twice.membership == once.membership == MembershipSets(requesting=("m1",))
        assert _membership(store, event_id) == once.membership

    def test_cannot_request_for_another_mentor(self, service, add_event, make_caller):
        event_id = add_event()
        with pytest.raises(NotAuthorizedError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m2")

    def test_role_without_capability_is_rejected(self, service, store, add_event, make_caller):
        event_id = add_event()
        with pytest.raises(NotAuthorizedError):
            service.request_membership(make_caller(Role.STAFF, "s1"), event_id, "s1")
        assert _membership(store, event_id) == MembershipSets()

    @pytest.mark.parametrize("field", ["accepted", "declined"])
    def test_re_request_after_decision_conflicts(self, service, store, add_event, make_caller, field):
        """Re-requesting after accept or decline is not a supported transition."""
        event_id = add_event(**{field: ["m1"]})
        before = _membership(store, event_id)
        with pytest.raises(ConflictingStateError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m1")
        assert _membership(store, event_id) == before

    def test_full_event_is_closed(self, service, add_event, make_caller):
        event_id = add_event(accepted=["m2"], required=1)
        with pytest.raises(EventClosedError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m1")

    def test_past_event_is_closed(self, service, add_event, make_caller):
        event_id = add_event(starts_in=-timedelta(days=1))
        with pytest.raises(EventClosedError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m1")

    def test_unknown_event_raises_not_found(self, service, make_caller):
        with pytest.raises(EventNotFoundError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), str(uuid.uuid4()), "m1")

    def test_malformed_event_id_raises_invalid(self, service, make_caller):
        with pytest.raises(InvalidEventIdError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), "nope", "m1")

    def test_unselected_mentor_gets_not_found(self, service, store, add_event, make_caller):
        event_id = add_event(selected=["m2"])
        with pytest.raises(EventNotFoundError):
            service.request_membership(make_caller(Role.MENTOR, "m1"), event_id, "m1")
        assert _membership(store, event_id) == MembershipSets()

    def test_repeated_request_is_logged_once(
        self, service, add_event, make_caller, caplog, monkeypatch
    ):
        monkeypatch.setattr(logging.getLogger("mentorbooking"), "propagate", True)
        event_id = add_event()
        caller = make_caller(Role.MENTOR, "m1")
        with caplog.at_level(logging.INFO, logger="mentorbooking"):
            service.request_membership(caller, event_id, "m1")
            service.request_membership(caller, event_id, "m1")
        requested = [
            r for r in caplog.records if r.levelno == logging.INFO and "requested" in r.getMessage()
        ]
        assert len(requested) == 1


class TestConcurrentRequests:
    """Concurrent requests from different mentors must not lose updates."""

    def test_two_mentors_both_land(self, service, store, add_event, make_caller):
        event_id = add_event()
        callers = [make_caller(Role.MENTOR, "m1"), make_caller(Role.MENTOR, "m2")]
        with ThreadPoolExecutor(max_workers=2) as pool:
            list(pool.map(lambda c: service.request_membership(c, event_id, c.viewer_id), callers))
        assert sorted(_membership(store, event_id).requesting) == ["m1", "m2"]

    def test_many_mentors_all_land(self, service, store, add_event, make_caller):
        event_id = add_event(required=50)
        callers = [make_caller(Role.MENTOR, f"m{i}") for i in range(40)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda c: service.request_membership(c, event_id, c.viewer_id), callers))
        assert sorted(_membership(store, event_id).requesting) == sorted(
            c.viewer_id for c in callers
        )


class TestDecideMembership:
    """Tests for MembershipService.decide_membership."""

    def test_approve_moves_mentor_to_accepted(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m1", "m2"])
        event = service.decide_membership(
            make_caller(Role.STAFF, "s1"), event_id, "m1", Decision.APPROVE
        )
        assert event.membership.requesting == ("m2",)
        assert "m1" in event.membership.accepted

    def test_decline_moves_mentor_to_declined(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m1"])
        event = service.decide_membership(
            make_caller(Role.SUPER_ADMIN, "a1"), event_id, "m1", Decision.DECLINE
        )
        assert event.membership == MembershipSets(declined=("m1",))

    def test_absent_request_raises_and_leaves_sets(self, service, store, add_event, make_caller):
        """Deciding on a mentor who is not requesting fails with no change."""
        event_id = add_event(requesting=["m1", "m2"], accepted=["m4"])
        before = _membership(store, event_id)
        with pytest.raises(RequestNotFoundError):
            service.decide_membership(
                make_caller(Role.STAFF, "s1"), event_id, "m3", Decision.APPROVE
            )
        assert _membership(store, event_id) == before

    def test_second_decision_on_same_request_fails(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m1"])
        staff = make_caller(Role.STAFF, "s1")
        service.decide_membership(staff, event_id, "m1", Decision.APPROVE)
        with pytest.raises(RequestNotFoundError):
            service.decide_membership(staff, event_id, "m1", Decision.DECLINE)

    def test_mentor_cannot_decide(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m1"])
        with pytest.raises(NotAuthorizedError):
            service.decide_membership(
                make_caller(Role.MENTOR, "m1"), event_id, "m1", Decision.APPROVE
            )

    def test_blank_mentor_id_is_invalid(self, service, add_event, make_caller):
        event_id = add_event()
        with pytest.raises(InvalidMentorIdError):
            service.decide_membership(make_caller(Role.STAFF, "s1"), event_id, "", Decision.APPROVE)


class TestAssignment:
    """Tests for MembershipService.assign and unassign."""

    def test_assign_then_unassign_round_trip(self, service, store, add_event, make_caller):
        event_id = add_event(requesting=["m2"], accepted=["m3"], declined=["m4"])
        before = _membership(store, event_id)
        manager = make_caller(Role.MENTORING_MANAGEMENT, "mm1")
        assigned = service.assign(manager, event_id, "m1")
        assert assigned.membership.accepted == ("m3", "m1")
        restored = service.unassign(manager, event_id, "m1")
        assert restored.membership == before

    def test_assign_removes_pending_request(self, service, add_event, make_caller):
        event_id = add_event(requesting=["m1", "m2"])
        event = service.assign(make_caller(Role.MENTORING_MANAGEMENT, "mm1"), event_id, "m1")
        assert event.membership.requesting == ("m2",)
        assert event.membership.accepted == ("m1",)

    def test_unassign_returns_mentor_to_none(self, service, add_event, make_caller):
        event_id = add_event(accepted=["m1"])
        event = service.unassign(make_caller(Role.MENTORING_MANAGEMENT, "mm1"), event_id, "m1")
        assert event.membership == MembershipSets()

    @pytest.mark.parametrize("role", [Role.STAFF, Role.SUPER_ADMIN, Role.MENTOR])
    def test_only_mentoring_management_assigns(self, service, add_event, make_caller, role):
        event_id = add_event()
        caller = make_caller(role, "x1")
        with pytest.raises(NotAuthorizedError):
            service.assign(caller, event_id, "m1")
        with pytest.raises(NotAuthorizedError):
            service.unassign(caller, event_id, "m1")

    def test_unknown_event_raises_not_found(self, service, make_caller):
        with pytest.raises(EventNotFoundError):
            service.assign(make_caller(Role.MENTORING_MANAGEMENT, "mm1"), str(uuid.uuid4()), "m1")


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            EventService(store).get_event("not-a-uuid")

    def test_get_event_not_found_raises_error(self, store):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            EventService(store).get_event(str(uuid.uuid4()))

    def test_get_event_returns_event(self, store, add_event):
        event_id = add_event()
        assert str(EventService(store).get_event(event_id).id) == event_id

    def test_pending_requests_for_staff(self, store, add_event, make_caller):
        pending = add_event(requesting=["m1"])
        add_event(accepted=["m2"])
        events = EventService(store).pending_requests(make_caller(Role.STAFF, "s1"))
        assert [str(e.id) for e in events] == [pending]

    def test_pending_requests_hidden_from_mentors(self, store, make_caller):
        with pytest.raises(NotAuthorizedError):
            EventService(store).pending_requests(make_caller(Role.MENTOR, "m1"))

    def test_requested_by_lists_callers_open_requests(self, store, add_event, make_caller):
        mine = add_event(requesting=["m1"])
        add_event(requesting=["m2"])
        events = EventService(store).requested_by(make_caller(Role.MENTOR, "m1"))
        assert [str(e.id) for e in events] == [mine]

    def test_integrity_report_requires_admin_data(self, store, add_event, make_caller):
        broken = add_event(requesting=["m1"], accepted=["m1"])
        add_event(accepted=["m2"])
        service = EventService(store)
        with pytest.raises(NotAuthorizedError):
            service.integrity_report(make_caller(Role.STAFF, "s1"))
        events = service.integrity_report(make_caller(Role.SUPER_ADMIN, "a1"))
        assert [str(e.id) for e in events] == [broken]

    def test_requested_by_skips_unselected_events(self, store, add_event, make_caller):
        visible = add_event(requesting=["m1"])
        add_event(requesting=["m1"], selected=["m2"])
        events = EventService(store).requested_by(make_caller(Role.MENTOR, "m1"))
        assert [str(e.id) for e in events] == [visible]

    def test_ensure_visible_hides_unselected_event(self, store, add_event, make_caller):
        service = EventService(store)
        event = service.get_event(add_event(selected=["m2"]))
        with pytest.raises(EventNotFoundError):
            service.ensure_visible(make_caller(Role.MENTOR, "m1"), event)
        assert service.ensure_visible(make_caller(Role.STAFF, "s1"), event) is event
