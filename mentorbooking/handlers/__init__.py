from mentorbooking.handlers.views import (
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

__all__ = [
    "EventListView",
    "EventDetailView",
    "PendingRequestListView",
    "IntegrityReportView",
    "MentorRequestView",
    "MentorDecisionView",
    "MentorAssignmentView",
    "MyRequestListView",
    "NewlyAcceptedView",
]
