"""Django ORM implementation of the EventStore."""

from collections.abc import Iterable

from django.db.models import F, Value
from django.db.models.functions import Greatest

from events import models
from events.domain import (
    Event,
    EventId,
    EventSummary,
    Money,
    Quantity,
    TicketCategory,
    TicketCategoryId,
)
from events.stores.db_errors import store_errors
from events.stores.interfaces import EventStore


def _to_summary(row: models.Event) -> EventSummary:
    return EventSummary(
        id=EventId(row.id),
        city=row.city,
        venue=row.venue,
        date=row.date,
    )


def _to_ticket_category(row: models.TicketCategory, event: EventSummary) -> TicketCategory:
    return TicketCategory(
        id=TicketCategoryId(row.id),
        event=event,
        category_name=row.category_name,
        price=Money(row.price),
        available_quantity=Quantity(row.available_quantity),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """PostgreSQL-backed event store using Django ORM."""

    def list_events(self) -> list[Event]:
        with store_errors("list events"):
            rows = list(
                models.Event.objects.order_by("date").prefetch_related(
                    "ticket_categories"
                )
            )
        events = []
        for row in rows:
            summary = _to_summary(row)
            events.append(
                Event(
                    id=summary.id,
                    city=row.city,
                    venue=row.venue,
                    date=row.date,
                    created_at=row.created_at,
                    updated_at=row.updated_at,
                    ticket_categories=tuple(
                        _to_ticket_category(category, summary)
                        for category in row.ticket_categories.all()
                    ),
                )
            )
        return events

    def get_ticket_category(
        self, ticket_category_id: TicketCategoryId
    ) -> TicketCategory | None:
        with store_errors("read ticket category"):
            row = (
                models.TicketCategory.objects.select_related("event")
                .filter(pk=ticket_category_id.value)
                .first()
            )
        if row is None:
            return None
        return _to_ticket_category(row, _to_summary(row.event))

    def get_ticket_categories(
        self, ticket_category_ids: Iterable[TicketCategoryId]
    ) -> dict[TicketCategoryId, TicketCategory]:
        ids = [ticket_category_id.value for ticket_category_id in ticket_category_ids]
        with store_errors("read ticket categories"):
            rows = list(
                models.TicketCategory.objects.select_related("event").filter(pk__in=ids)
            )
        return {
            TicketCategoryId(row.id): _to_ticket_category(row, _to_summary(row.event))
            for row in rows
        }

    def decrement_available_quantity(
        self, ticket_category_id: TicketCategoryId, amount: int
    ) -> bool:
        with store_errors("decrement available quantity"):
            updated = models.TicketCategory.objects.filter(
                pk=ticket_category_id.value
            ).update(
                available_quantity=Greatest(F("available_quantity") - amount, Value(0))
            )
        return updated > 0
