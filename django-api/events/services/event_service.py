"""Event service - catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from events.domain import Event, TicketCategory, TicketCategoryId
from events.domain.errors import InvalidTicketCategoryIdError, TicketCategoryNotFoundError
from events.stores.interfaces import EventStore


def parse_ticket_category_id(raw_id: str) -> TicketCategoryId:
    """Parse a ticket category ID.

    Raises:
        InvalidTicketCategoryIdError: If raw_id is not a valid UUID.
    """
    try:
        return TicketCategoryId.from_string(str(raw_id))
    except ValueError as exc:
        raise InvalidTicketCategoryIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events, soonest first."""
        return self._store.list_events()

    def get_ticket_category(self, ticket_category_id: str) -> TicketCategory:
        """Return a ticket category by ID.

        Raises:
            InvalidTicketCategoryIdError: If the ID is not a valid UUID.
            TicketCategoryNotFoundError: If the ticket category does not exist.
        """
        parsed = parse_ticket_category_id(ticket_category_id)
        ticket_category = self._store.get_ticket_category(parsed)
        if ticket_category is None:
            raise TicketCategoryNotFoundError(ticket_category_id)
        return ticket_category
