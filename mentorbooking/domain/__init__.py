from mentorbooking.domain.models import Event, MembershipSets
from mentorbooking.domain.permissions import Caller, Capabilities, Role
from mentorbooking.domain.value_objects import (
    Capacity,
    Decision,
    EventId,
    MentorId,
    MentorStatus,
)

__all__ = [
    "Event",
    "MembershipSets",
    "EventId",
    "MentorId",
    "Capacity",
    "Decision",
    "MentorStatus",
    "Caller",
    "Capabilities",
    "Role",
]
