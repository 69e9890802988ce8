"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import (
    DomainError,
    InvalidTicketCategoryIdError,
    PersistenceError,
    TicketCategoryNotFoundError,
)
from events.handlers.serializers import EventSerializer
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidTicketCategoryIdError: status.HTTP_400_BAD_REQUEST,
    TicketCategoryNotFoundError: status.HTTP_404_NOT_FOUND,
    PersistenceError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(error: DomainError) -> Response:
    if isinstance(error, PersistenceError):
        logger.warning("Store unavailable during %s", error.operation)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST),
    )


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get_service(self) -> EventService:
        return EventService(DjangoEventStore())

    def get(self, request: Request) -> Response:
        try:
            events = self.get_service().list_events()
        except DomainError as exc:
            return error_response(exc)
        return Response({"results": EventSerializer(events, many=True).data})
