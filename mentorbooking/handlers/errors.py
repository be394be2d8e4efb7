"""Maps domain errors to HTTP responses.

Responses carry only the error code and its user-safe message.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from mentorbooking.cache import invalidate_event
from mentorbooking.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    RequestNotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_MENTOR_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REQUEST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICTING_STATE: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    """DRF exception handler that understands DomainError."""
    if not isinstance(exc, DomainError):
        return exception_handler(exc, context)

    logger.warning("Request failed with %s", exc)
    if isinstance(exc, (EventNotFoundError, RequestNotFoundError)):
        # The caller is looking at stale data; force the next read to refetch.
        invalidate_event(exc.event_id)
    return Response(
        {"code": exc.code.value, "message": exc.message},
        status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
    )
