"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain error mapping to handlers/errors.py
- Never contain business logic
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from mentorbooking.cache import EVENT_LIST_KEY, event_detail_key
from mentorbooking.handlers.permissions import get_caller
from mentorbooking.handlers.serializers import (
    DecisionSerializer,
    EventSerializer,
    IntegrityReportSerializer,
)
from mentorbooking.services.acceptance_tracker import AcceptanceTracker
from mentorbooking.services.event_service import EventService
from mentorbooking.services.membership_service import MembershipService
from mentorbooking.stores.django_store import DjangoEventStore
from mentorbooking.stores.session_store import SessionSnapshotStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_membership_service() -> MembershipService:
    return MembershipService(DjangoEventStore())


def _cache_ttl() -> int:
    return settings.MENTORBOOKING["EVENT_CACHE_TTL"]


def _cached_events(service: EventService):
    events = cache.get(EVENT_LIST_KEY)
    if events is None:
        events = service.list_events()
        cache.set(EVENT_LIST_KEY, events, _cache_ttl())
    return events


def _event_response(request: Request, event) -> Response:
    return Response(EventSerializer(event, context={"caller": get_caller(request)}).data)


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        caller = get_caller(request)
        service = get_event_service()
        events = service.visible_to(caller, _cached_events(service))
        serializer = EventSerializer(events, many=True, context={"caller": caller})
        return Response(serializer.data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        service = get_event_service()
        key = event_detail_key(event_id)
        event = cache.get(key)
        if event is None:
            event = service.get_event(event_id)
            cache.set(key, event, _cache_ttl())
        return _event_response(request, service.ensure_visible(get_caller(request), event))


class PendingRequestListView(APIView):
    """Handler for GET /api/events/pending"""

    def get(self, request: Request) -> Response:
        caller = get_caller(request)
        events = get_event_service().pending_requests(caller)
        return Response(EventSerializer(events, many=True, context={"caller": caller}).data)


class IntegrityReportView(APIView):
    """Handler for GET /api/events/integrity"""

    def get(self, request: Request) -> Response:
        caller = get_caller(request)
        events = get_event_service().integrity_report(caller)
        serializer = IntegrityReportSerializer(events, many=True, context={"caller": caller})
        return Response(serializer.data)


class MentorRequestView(APIView):
    """Handler for POST /api/events/{event_id}/requests"""

    def post(self, request: Request, event_id: str) -> Response:
        caller = get_caller(request)
        event = get_membership_service().request_membership(caller, event_id, caller.viewer_id)
        return _event_response(request, event)


class MentorDecisionView(APIView):
    """Handler for POST /api/events/{event_id}/requests/{mentor_id}/decision"""

    def post(self, request: Request, event_id: str, mentor_id: str) -> Response:
        serializer = DecisionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = get_membership_service().decide_membership(
            get_caller(request), event_id, mentor_id, serializer.validated_data["decision"]
        )
        return _event_response(request, event)


class MentorAssignmentView(APIView):
    """Handler for PUT/DELETE /api/events/{event_id}/mentors/{mentor_id}"""

    def put(self, request: Request, event_id: str, mentor_id: str) -> Response:
        event = get_membership_service().assign(get_caller(request), event_id, mentor_id)
        return _event_response(request, event)

    def delete(self, request: Request, event_id: str, mentor_id: str) -> Response:
        event = get_membership_service().unassign(get_caller(request), event_id, mentor_id)
        return _event_response(request, event)


class MyRequestListView(APIView):
    """Handler for GET /api/me/requests"""

    def get(self, request: Request) -> Response:
        caller = get_caller(request)
        events = get_event_service().requested_by(caller)
        return Response(EventSerializer(events, many=True, context={"caller": caller}).data)


class NewlyAcceptedView(APIView):
    """Handler for GET /api/me/accepted/new"""

    def get(self, request: Request) -> Response:
        caller = get_caller(request)
        tracker = AcceptanceTracker(SessionSnapshotStore(request.session))
        newly_accepted = tracker.recompute(caller, _cached_events(get_event_service()))
        return Response({"event_ids": list(newly_accepted)})
