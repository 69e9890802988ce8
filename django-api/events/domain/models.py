"""Domain models representing persisted catalog state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, Money, Quantity, TicketCategoryId


@dataclass(frozen=True)
class EventSummary:
    """Display fields of the event a ticket category belongs to."""

    id: EventId
    city: str
    venue: str
    date: datetime


@dataclass(frozen=True)
class TicketCategory:
    """Domain representation of a TicketCategory."""

    id: TicketCategoryId
    event: EventSummary
    category_name: str
    price: Money
    available_quantity: Quantity
    created_at: datetime

    @property
    def event_id(self) -> EventId:
        return self.event.id


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event with its ticket categories."""

    id: EventId
    city: str
    venue: str
    date: datetime
    created_at: datetime
    updated_at: datetime
    ticket_categories: tuple[TicketCategory, ...] = ()
