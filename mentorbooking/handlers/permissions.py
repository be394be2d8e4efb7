"""Caller resolution: maps the authenticated user's role to capabilities."""

from rest_framework.request import Request

from mentorbooking.domain import Caller, Capabilities, Role
from mentorbooking.models import Account

_STAFF_ROLES = frozenset({Role.STAFF, Role.MENTORING_MANAGEMENT, Role.SUPER_ADMIN})


def capabilities_for_role(role: Role) -> Capabilities:
    has_staff_access = role in _STAFF_ROLES
    return Capabilities(
        can_request_to_mentor=role is Role.MENTOR,
        can_assign_mentors=role is Role.MENTORING_MANAGEMENT,
        can_decide_mentor_requests=has_staff_access,
        can_view_admin_data=role is Role.SUPER_ADMIN,
        can_view_pending_requests=has_staff_access,
    )


def get_caller(request: Request) -> Caller:
    """Build the Caller for an authenticated request.

    Users without an account record are treated as guests.
    """
    user = request.user
    try:
        role = Role(user.account.role)
    except Account.DoesNotExist:
        role = Role.GUEST
    return Caller(viewer_id=str(user.pk), role=role, capabilities=capabilities_for_role(role))
