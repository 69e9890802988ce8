"""Django ORM implementations of the order and outbox stores."""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from events.domain import Money, TicketCategoryId
from events.stores.db_errors import store_errors
from orders import models
from orders.domain import (
    InventoryAdjustment,
    NewOrder,
    NewOrderItem,
    Order,
    OrderDetail,
    OrderId,
    OrderItem,
    OrderItemDetail,
    OrderNumber,
    OrderStatus,
)
from orders.domain.errors import OrderNumberConflictError
from orders.stores.interfaces import InventoryOutboxStore, OrderStore


def _to_order(row: models.Order) -> Order:
    return Order(
        id=OrderId(row.id),
        order_number=OrderNumber(row.order_number),
        customer_name=row.customer_name,
        customer_email=row.customer_email,
        customer_phone=row.customer_phone,
        total_amount=Money(row.total_amount),
        status=OrderStatus(row.status),
        created_at=row.created_at,
    )


def _to_order_item(row: models.OrderItem) -> OrderItem:
    return OrderItem(
        id=row.id,
        order_id=OrderId(row.order_id),
        ticket_category_id=TicketCategoryId(row.ticket_category_id),
        quantity=row.quantity,
        unit_price=Money(row.unit_price),
        subtotal=Money(row.subtotal),
        created_at=row.created_at,
    )


def _to_item_detail(row: models.OrderItem) -> OrderItemDetail:
    category = row.ticket_category
    return OrderItemDetail(
        quantity=row.quantity,
        unit_price=Money(row.unit_price),
        subtotal=Money(row.subtotal),
        category_name=category.category_name,
        city=category.event.city,
        venue=category.event.venue,
        date=category.event.date,
    )


class DjangoOrderStore(OrderStore):
    """PostgreSQL-backed order store using Django ORM."""

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Commit the block as one transaction; commit failures become PersistenceError."""
        with store_errors("commit order"):
            with transaction.atomic():
                yield

    def insert_order(self, new_order: NewOrder) -> Order:
        with store_errors("insert order"):
            try:
                with transaction.atomic():
                    row = models.Order.objects.create(
                        order_number=new_order.order_number.value,
                        customer_name=new_order.contact.name,
                        customer_email=new_order.contact.email,
                        customer_phone=new_order.contact.phone,
                        total_amount=new_order.total_amount.amount,
                        status=new_order.status.value,
                    )
            except IntegrityError as exc:
                if models.Order.objects.filter(
                    order_number=new_order.order_number.value
                ).exists():
                    raise OrderNumberConflictError(new_order.order_number.value) from exc
                raise
        return _to_order(row)

    def insert_order_items(
        self, order_id: OrderId, items: Sequence[NewOrderItem]
    ) -> list[OrderItem]:
        rows = [
            models.OrderItem(
                order_id=order_id.value,
                ticket_category_id=item.ticket_category_id.value,
                quantity=item.quantity,
                unit_price=item.unit_price.amount,
                subtotal=item.subtotal.amount,
            )
            for item in items
        ]
        with store_errors("insert order items"):
            created = models.OrderItem.objects.bulk_create(rows)
        return [_to_order_item(row) for row in created]

    def get_order_by_number(self, order_number: OrderNumber) -> OrderDetail | None:
        with store_errors("read order"):
            row = (
                models.Order.objects.filter(order_number=order_number.value)
                .prefetch_related("items__ticket_category__event")
                .first()
            )
            if row is None:
                return None
            items = tuple(_to_item_detail(item) for item in row.items.all())
        return OrderDetail(
            order_number=OrderNumber(row.order_number),
            customer_name=row.customer_name,
            customer_email=row.customer_email,
            customer_phone=row.customer_phone,
            total_amount=Money(row.total_amount),
            status=OrderStatus(row.status),
            created_at=row.created_at,
            items=items,
        )


class DjangoInventoryOutboxStore(InventoryOutboxStore):
    """Outbox of pending inventory decrements kept in the orders database."""

    def record(
        self,
        order_id: OrderId,
        ticket_category_id: TicketCategoryId,
        amount: int,
        error: str,
    ) -> None:
        with store_errors("record inventory adjustment"):
            models.InventoryAdjustment.objects.create(
                order_id=order_id.value,
                ticket_category_id=ticket_category_id.value,
                amount=amount,
                last_error=error,
            )

    def list_pending(self, limit: int) -> list[InventoryAdjustment]:
        with store_errors("list inventory adjustments"):
            rows = list(
                models.InventoryAdjustment.objects.filter(
                    status=models.InventoryAdjustment.Status.PENDING
                ).order_by("created_at", "id")[:limit]
            )
        return [
            InventoryAdjustment(
                id=row.id,
                order_id=OrderId(row.order_id),
                ticket_category_id=TicketCategoryId(row.ticket_category_id),
                amount=row.amount,
                attempts=row.attempts,
            )
            for row in rows
        ]

    def mark_applied(self, adjustment_id: int) -> None:
        with store_errors("update inventory adjustment"):
            models.InventoryAdjustment.objects.filter(pk=adjustment_id).update(
                status=models.InventoryAdjustment.Status.APPLIED,
                attempts=F("attempts") + 1,
                last_error="",
                updated_at=timezone.now(),
            )

    def mark_failed(self, adjustment_id: int, error: str) -> None:
        with store_errors("update inventory adjustment"):
            models.InventoryAdjustment.objects.filter(pk=adjustment_id).update(
                attempts=F("attempts") + 1,
                last_error=error,
                updated_at=timezone.now(),
            )
