"""Serializers for transforming domain models to API responses.

Pass the resolved Caller as ``context["caller"]``; it decides which
membership details are exposed and which viewer status is reported.
"""

from django.utils import timezone
from rest_framework import serializers

from mentorbooking.domain import Decision, MentorId
from mentorbooking.domain.projections import (
    accepted_count,
    can_request,
    open_slots,
    pending_request_count,
    project_status,
)


class MembershipSerializer(serializers.Serializer):
    """Serializer for the three membership sets."""

    requesting_mentors = serializers.ListField(child=serializers.CharField(), source="requesting")
    accepted_mentors = serializers.ListField(child=serializers.CharField(), source="accepted")
    declined_mentors = serializers.ListField(child=serializers.CharField(), source="declined")


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    company = serializers.CharField()
    starts_at = serializers.DateTimeField()
    required_mentors = serializers.IntegerField(source="required_mentors.value")
    accepted_count = serializers.SerializerMethodField()
    pending_request_count = serializers.SerializerMethodField()
    open_slots = serializers.SerializerMethodField()
    viewer_status = serializers.SerializerMethodField()
    can_request = serializers.SerializerMethodField()
    membership = serializers.SerializerMethodField()

    def get_accepted_count(self, event) -> int:
        return accepted_count(event)

    def get_pending_request_count(self, event) -> int:
        return pending_request_count(event)

    def get_open_slots(self, event) -> int:
        return open_slots(event)

    def get_viewer_status(self, event) -> str:
        caller = self.context["caller"]
        return project_status(event, MentorId(caller.viewer_id)).value

    def get_can_request(self, event) -> bool:
        return can_request(event, self.context["caller"], timezone.now())

    def get_membership(self, event) -> dict | None:
        if not self.context["caller"].capabilities.can_view_pending_requests:
            return None
        return MembershipSerializer(event.membership).data


class IntegrityReportSerializer(EventSerializer):
    """Event plus the mentors that appear in more than one set."""

    overlapping_mentors = serializers.SerializerMethodField()

    def get_overlapping_mentors(self, event) -> list[str]:
        return list(event.membership.overlapping())


class DecisionSerializer(serializers.Serializer):
    """Input for a staff decision on a pending request."""

    decision = serializers.ChoiceField(choices=[decision.value for decision in Decision])

    def to_internal_value(self, data):
        validated = super().to_internal_value(data)
        return {"decision": Decision(validated["decision"])}
