"""Pytest configuration and shared fixtures."""

import copy
from collections.abc import Iterable, Sequence
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models as event_models
from events.domain import (
    Event,
    EventId,
    EventSummary,
    Money,
    Quantity,
    TicketCategory,
    TicketCategoryId,
)
from events.domain.errors import PersistenceError
from events.stores.interfaces import EventStore
from orders.domain import (
    CartLineItem,
    InventoryAdjustment,
    NewOrder,
    NewOrderItem,
    Order,
    OrderDetail,
    OrderId,
    OrderItem,
    OrderItemDetail,
    OrderNumber,
)
from orders.domain.errors import OrderNumberConflictError
from orders.stores.interfaces import InventoryOutboxStore, OrderStore

CONCERT_DATE = datetime(2026, 11, 14, 20, 0, tzinfo=dt_timezone.utc)


def build_ticket_category(
    price: str = "45.00",
    available_quantity: int = 5,
    category_name: str = "Category 1",
    city: str = "Paris",
    venue: str = "Accor Arena",
    date: datetime = CONCERT_DATE,
) -> TicketCategory:
    return TicketCategory(
        id=TicketCategoryId(uuid4()),
        event=EventSummary(
            id=EventId(uuid4()), city=city, venue=venue, date=date
        ),
        category_name=category_name,
        price=Money(Decimal(price)),
        available_quantity=Quantity(available_quantity),
        created_at=CONCERT_DATE,
    )


def build_line(
    ticket_category: TicketCategory | None = None, quantity: int = 1, **overrides
) -> CartLineItem:
    line = CartLineItem.from_ticket_category(
        ticket_category or build_ticket_category(), quantity
    )
    return replace(line, **overrides) if overrides else line


class InMemoryEventStore(EventStore):
    """Catalog held in a dict. Decrements can be made to fail per category."""

    def __init__(self, categories: Iterable[TicketCategory] = ()) -> None:
        self.categories = {category.id: category for category in categories}
        self.failing_decrements: set[TicketCategoryId] = set()

    def list_events(self) -> list[Event]:
        events: dict[EventId, Event] = {}
        for category in self.categories.values():
            summary = category.event
            event = events.get(summary.id) or Event(
                id=summary.id,
                city=summary.city,
                venue=summary.venue,
                date=summary.date,
                created_at=summary.date,
                updated_at=summary.date,
            )
            events[summary.id] = replace(
                event, ticket_categories=event.ticket_categories + (category,)
            )
        return sorted(events.values(), key=lambda event: event.date)

    def get_ticket_category(self, ticket_category_id):
        return self.categories.get(ticket_category_id)

    def get_ticket_categories(self, ticket_category_ids):
        return {
            ticket_category_id: self.categories[ticket_category_id]
            for ticket_category_id in ticket_category_ids
            if ticket_category_id in self.categories
        }

    def decrement_available_quantity(self, ticket_category_id, amount):
        if ticket_category_id in self.failing_decrements:
            raise PersistenceError("decrement available quantity", transient=True)
        category = self.categories.get(ticket_category_id)
        if category is None:
            return False
        remaining = max(category.available_quantity.value - amount, 0)
        self.categories[ticket_category_id] = replace(
            category, available_quantity=Quantity(remaining)
        )
        return True


class InMemoryOrderStore(OrderStore):
    """Orders held in dicts with snapshot rollback for atomic blocks."""

    def __init__(self, event_store: InMemoryEventStore) -> None:
        self._event_store = event_store
        self.orders: dict[str, Order] = {}
        self.items: dict[OrderId, list[OrderItem]] = {}
        self.fail_item_insert = False
        self.fail_order_insert = False
        self.reserved_numbers: set[str] = set()

    @contextmanager
    def atomic(self):
        saved = (copy.copy(self.orders), copy.deepcopy(self.items))
        try:
            yield
        except BaseException:
            self.orders, self.items = saved
            raise

    def insert_order(self, new_order: NewOrder) -> Order:
        if self.fail_order_insert:
            raise PersistenceError("insert order")
        number = new_order.order_number.value
        if number in self.orders or number in self.reserved_numbers:
            raise OrderNumberConflictError(number)
        order = Order(
            id=OrderId(uuid4()),
            order_number=new_order.order_number,
            customer_name=new_order.contact.name,
            customer_email=new_order.contact.email,
            customer_phone=new_order.contact.phone,
            total_amount=new_order.total_amount,
            status=new_order.status,
            created_at=timezone.now(),
        )
        self.orders[number] = order
        self.items[order.id] = []
        return order

    def insert_order_items(
        self, order_id: OrderId, items: Sequence[NewOrderItem]
    ) -> list[OrderItem]:
        if self.fail_item_insert:
            raise PersistenceError("insert order items")
        created = [
            OrderItem(
                id=uuid4(),
                order_id=order_id,
                ticket_category_id=item.ticket_category_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
                created_at=timezone.now(),
            )
            for item in items
        ]
        self.items[order_id].extend(created)
        return created

    def get_order_by_number(self, order_number: OrderNumber) -> OrderDetail | None:
        order = self.orders.get(order_number.value)
        if order is None:
            return None
        details = []
        for item in self.items[order.id]:
            category = self._event_store.categories[item.ticket_category_id]
            details.append(
                OrderItemDetail(
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                    category_name=category.category_name,
                    city=category.event.city,
                    venue=category.event.venue,
                    date=category.event.date,
                )
            )
        return OrderDetail(
            order_number=order.order_number,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            customer_phone=order.customer_phone,
            total_amount=order.total_amount,
            status=order.status,
            created_at=order.created_at,
            items=tuple(details),
        )


class InMemoryOutboxStore(InventoryOutboxStore):
    def __init__(self) -> None:
        self.pending: dict[int, InventoryAdjustment] = {}
        self.errors: dict[int, str] = {}
        self.applied: list[int] = []
        self.fail_record = False
        self._next_id = 1

    def record(self, order_id, ticket_category_id, amount, error):
        if self.fail_record:
            raise PersistenceError("record inventory adjustment")
        adjustment = InventoryAdjustment(
            id=self._next_id,
            order_id=order_id,
            ticket_category_id=ticket_category_id,
            amount=amount,
            attempts=0,
        )
        self.pending[adjustment.id] = adjustment
        self.errors[adjustment.id] = error
        self._next_id += 1

    def list_pending(self, limit):
        return list(self.pending.values())[:limit]

    def mark_applied(self, adjustment_id):
        self.pending.pop(adjustment_id)
        self.applied.append(adjustment_id)

    def mark_failed(self, adjustment_id, error):
        adjustment = self.pending[adjustment_id]
        self.pending[adjustment_id] = replace(adjustment, attempts=adjustment.attempts + 1)
        self.errors[adjustment_id] = error


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def order_store(event_store) -> InMemoryOrderStore:
    return InMemoryOrderStore(event_store)


@pytest.fixture
def outbox() -> InMemoryOutboxStore:
    return InMemoryOutboxStore()


@pytest.fixture
def event_row(db) -> event_models.Event:
    return event_models.Event.objects.create(
        city="Paris", venue="Accor Arena", date=CONCERT_DATE
    )


@pytest.fixture
def category_row(event_row) -> event_models.TicketCategory:
    return event_models.TicketCategory.objects.create(
        event=event_row,
        category_name="Category 1",
        price=Decimal("45.00"),
        available_quantity=5,
    )


@pytest.fixture
def pit_row(event_row) -> event_models.TicketCategory:
    return event_models.TicketCategory.objects.create(
        event=event_row,
        category_name="Pit",
        price=Decimal("30.00"),
        available_quantity=10,
    )


@pytest.fixture
def make_category():
    return build_ticket_category


@pytest.fixture
def make_line():
    return build_line
