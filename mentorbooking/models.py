"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models

from mentorbooking.domain.permissions import Role

ROLE_CHOICES = [(role.value, role.name.replace("_", " ").title()) for role in Role]


class Event(models.Model):
    """Persistence model for events.

    The three mentor columns are written only through
    EventStore.mutate_membership.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    company = models.CharField(max_length=255, blank=True)
    starts_at = models.DateTimeField()
    required_mentors = models.PositiveIntegerField(default=1)
    requesting_mentors = models.JSONField(default=list, blank=True)
    accepted_mentors = models.JSONField(default=list, blank=True)
    declined_mentors = models.JSONField(default=list, blank=True)
    initial_selected_mentors = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "mentorbooking_events"
        ordering = ["starts_at"]
        indexes = [
            models.Index(fields=["starts_at"], name="event_starts_at_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Account(models.Model):
    """Role attached to a Django user."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="account"
    )
    role = models.CharField(max_length=32, choices=ROLE_CHOICES, default=Role.GUEST.value)

    def __str__(self) -> str:
        return f"{self.user} ({self.role})"
