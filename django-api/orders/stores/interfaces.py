"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every method may raise
PersistenceError when the store cannot be reached.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from contextlib import AbstractContextManager

from events.domain import TicketCategoryId
from orders.domain import (
    Cart,
    InventoryAdjustment,
    NewOrder,
    NewOrderItem,
    Order,
    OrderDetail,
    OrderId,
    OrderItem,
    OrderNumber,
)


class OrderStore(ABC):
    """Interface for order persistence operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager:
        """Return a context in which all writes commit together or not at all."""
        ...

    @abstractmethod
    def insert_order(self, new_order: NewOrder) -> Order:
        """Insert an order and return it with its generated ID.

        Raises:
            OrderNumberConflictError: If the order number already exists.
        """
        ...

    @abstractmethod
    def insert_order_items(
        self, order_id: OrderId, items: Sequence[NewOrderItem]
    ) -> list[OrderItem]:
        """Insert all items of an order in one batch."""
        ...

    @abstractmethod
    def get_order_by_number(self, order_number: OrderNumber) -> OrderDetail | None:
        """Return an order with nested items, or None if not found."""
        ...


class InventoryOutboxStore(ABC):
    """Interface for the outbox of inventory decrements awaiting replay."""

    @abstractmethod
    def record(
        self,
        order_id: OrderId,
        ticket_category_id: TicketCategoryId,
        amount: int,
        error: str,
    ) -> None:
        """Record a decrement that could not be applied."""
        ...

    @abstractmethod
    def list_pending(self, limit: int) -> list[InventoryAdjustment]:
        """Return pending adjustments, oldest first."""
        ...

    @abstractmethod
    def mark_applied(self, adjustment_id: int) -> None:
        """Mark an adjustment as applied."""
        ...

    @abstractmethod
    def mark_failed(self, adjustment_id: int, error: str) -> None:
        """Count a failed replay attempt and keep the adjustment pending."""
        ...


class CartRepository(ABC):
    """Interface for loading and saving the cart owned by one shopper."""

    @abstractmethod
    def load(self) -> Cart:
        """Return the shopper's cart, empty if none was saved."""
        ...

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the shopper's cart."""
        ...
