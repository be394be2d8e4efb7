"""Pytest configuration and shared fixtures."""

import uuid
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from mentorbooking import models
from mentorbooking.domain import Caller, Capacity, Event, EventId, MembershipSets, Role
from mentorbooking.handlers.permissions import capabilities_for_role

# Mentor ids the domain-level tests use; make_event selects them all.
SELECTED_MENTORS = tuple(f"m{i}" for i in range(50))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_event():
    """Build a domain Event without touching the database."""

    def _make(
        *,
        requesting=(),
        accepted=(),
        declined=(),
        required=3,
        starts_in=timedelta(days=7),
        selected=SELECTED_MENTORS,
    ) -> Event:
        now = timezone.now()
        return Event(
            id=EventId(uuid.uuid4()),
            title="Pitch practice",
            company="Acme",
            starts_at=now + starts_in,
            required_mentors=Capacity(required),
            created_at=now,
            updated_at=now,
            membership=MembershipSets(
                requesting=tuple(requesting),
                accepted=tuple(accepted),
                declined=tuple(declined),
            ),
            initial_selected_mentors=tuple(selected),
        )

    return _make


@pytest.fixture
def make_caller():
    def _make(role: Role, viewer_id: str = "m1") -> Caller:
        return Caller(viewer_id=viewer_id, role=role, capabilities=capabilities_for_role(role))

    return _make


@pytest.fixture
def make_event_row():
    """Create a persisted event row."""

    def _make(**overrides) -> models.Event:
        fields = {
            "title": "Pitch practice",
            "company": "Acme",
            "starts_at": timezone.now() + timedelta(days=7),
            "required_mentors": 3,
        }
        fields.update(overrides)
        return models.Event.objects.create(**fields)

    return _make


@pytest.fixture
def make_user(django_user_model):
    """Create a user with an account of the given role."""

    def _make(username: str, role: Role):
        user = django_user_model.objects.create_user(username=username, password="secret")
        models.Account.objects.create(user=user, role=role.value)
        return user

    return _make


@pytest.fixture
def client_for():
    def _client(user) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _client
