from django.urls import path

from mentorbooking.handlers import (
    EventDetailView,
    EventListView,
    IntegrityReportView,
    MentorAssignmentView,
    MentorDecisionView,
    MentorRequestView,
    MyRequestListView,
    NewlyAcceptedView,
    PendingRequestListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/pending", PendingRequestListView.as_view(), name="pending-request-list"),
    path("events/integrity", IntegrityReportView.as_view(), name="integrity-report"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/requests",
        MentorRequestView.as_view(),
        name="mentor-request",
    ),
    path(
        "events/<str:event_id>/requests/<str:mentor_id>/decision",
        MentorDecisionView.as_view(),
        name="mentor-decision",
    ),
    path(
        "events/<str:event_id>/mentors/<str:mentor_id>",
        MentorAssignmentView.as_view(),
        name="mentor-assignment",
    ),
    path("me/requests", MyRequestListView.as_view(), name="my-request-list"),
    path("me/accepted/new", NewlyAcceptedView.as_view(), name="newly-accepted"),
]
