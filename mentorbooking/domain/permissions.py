"""Caller identity and the capability set the workflow branches on.

Capabilities are computed outside the domain (see handlers/permissions.py);
the services only read them.
"""

from dataclasses import dataclass, field
from enum import Enum


class Role(Enum):
    """Account roles."""

    GUEST = "guest"
    MENTOR = "mentor"
    COACH = "coach"
    STAFF = "staff"
    MENTORING_MANAGEMENT = "mentoringmanagement"
    SUPER_ADMIN = "super-admin"


@dataclass(frozen=True)
class Capabilities:
    """Boolean permission flags granted to a caller."""

    can_request_to_mentor: bool = False
    can_assign_mentors: bool = False
    can_decide_mentor_requests: bool = False
    can_view_admin_data: bool = False
    can_view_pending_requests: bool = False


@dataclass(frozen=True)
class Caller:
    """The authenticated viewer performing an action."""

    viewer_id: str
    role: Role
    capabilities: Capabilities = field(default_factory=Capabilities)

    @property
    def is_mentor(self) -> bool:
        return self.role is Role.MENTOR
