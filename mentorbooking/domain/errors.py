"""Domain error codes for the mentor booking module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_MENTOR_ID = "INVALID_MENTOR_ID"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    REQUEST_NOT_FOUND = "REQUEST_NOT_FOUND"
    CONFLICTING_STATE = "CONFLICTING_STATE"
    EVENT_CLOSED = "EVENT_CLOSED"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidMentorIdError(DomainError):
    """Raised when a mentor ID is empty."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MENTOR_ID,
            message="Invalid mentor ID",
        )


class NotAuthorizedError(DomainError):
    """Raised when the caller lacks the capability for an action."""

    def __init__(self, action: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_AUTHORIZED,
            message=f"Not allowed to {action}",
        )
        self.action = action


class RequestNotFoundError(DomainError):
    """Raised when a decision targets a mentor who is not requesting."""

    def __init__(self, event_id: str, mentor_id: str) -> None:
        super().__init__(
            code=ErrorCode.REQUEST_NOT_FOUND,
            message="No pending request for this mentor",
        )
        self.event_id = event_id
        self.mentor_id = mentor_id


class ConflictingStateError(DomainError):
    """Raised when a mentor re-requests after a decision."""

    def __init__(self, event_id: str, mentor_id: str, status: str) -> None:
        super().__init__(
            code=ErrorCode.CONFLICTING_STATE,
            message=f"Mentor is already {status} for this event",
        )
        self.event_id = event_id
        self.mentor_id = mentor_id


class EventClosedError(DomainError):
    """Raised when an event no longer takes mentor requests."""

    def __init__(self, event_id: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_CLOSED,
            message=f"Event is not accepting requests: {reason}",
        )
        self.event_id = event_id


class StoreUnavailableError(DomainError):
    """Raised when the backing store fails. Safe to retry."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Storage temporarily unavailable, please retry",
        )
