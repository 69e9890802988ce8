"""Domain models representing persisted order state.

Django ORM models are in orders/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from events.domain import Money, TicketCategoryId
from orders.domain.value_objects import ContactInfo, OrderId, OrderNumber, OrderStatus


@dataclass(frozen=True)
class NewOrder:
    """An order about to be inserted."""

    order_number: OrderNumber
    contact: ContactInfo
    total_amount: Money
    status: OrderStatus = OrderStatus.PENDING


@dataclass(frozen=True)
class NewOrderItem:
    """An order item about to be inserted alongside its order."""

    ticket_category_id: TicketCategoryId
    quantity: int
    unit_price: Money
    subtotal: Money


@dataclass(frozen=True)
class Order:
    """Domain representation of an Order."""

    id: OrderId
    order_number: OrderNumber
    customer_name: str
    customer_email: str
    customer_phone: str | None
    total_amount: Money
    status: OrderStatus
    created_at: datetime


@dataclass(frozen=True)
class OrderItem:
    """Domain representation of an OrderItem."""

    id: UUID
    order_id: OrderId
    ticket_category_id: TicketCategoryId
    quantity: int
    unit_price: Money
    subtotal: Money
    created_at: datetime


@dataclass(frozen=True)
class OrderItemDetail:
    """Order item joined with its ticket category and event for display."""

    quantity: int
    unit_price: Money
    subtotal: Money
    category_name: str
    city: str
    venue: str
    date: datetime


@dataclass(frozen=True)
class OrderDetail:
    """Order with nested items as shown on the confirmation view."""

    order_number: OrderNumber
    customer_name: str
    customer_email: str
    customer_phone: str | None
    total_amount: Money
    status: OrderStatus
    created_at: datetime
    items: tuple[OrderItemDetail, ...] = ()


@dataclass(frozen=True)
class InventoryAdjustment:
    """A decrement that could not be applied at checkout and awaits replay."""

    id: int
    order_id: OrderId
    ticket_category_id: TicketCategoryId
    amount: int
    attempts: int
