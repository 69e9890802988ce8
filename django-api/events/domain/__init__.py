from events.domain.models import Event, EventSummary, TicketCategory
from events.domain.value_objects import EventId, Money, Quantity, TicketCategoryId

__all__ = [
    "Event",
    "EventSummary",
    "TicketCategory",
    "EventId",
    "TicketCategoryId",
    "Money",
    "Quantity",
]
