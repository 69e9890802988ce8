"""Checkout orchestration: turns a cart into a persisted order.

Steps run sequentially: validate contact details, re-check the cart against
the catalog, insert the order and its items in one transaction, decrement
inventory per line, then clear the cart. Inventory decrement failures never
fail a checkout; they are logged and queued in the inventory outbox.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from events.domain.errors import PersistenceError
from events.stores.interfaces import EventStore
from orders.domain import (
    Cart,
    CartLineItem,
    ContactInfo,
    NewOrder,
    NewOrderItem,
    Order,
    OrderNumber,
)
from orders.domain.errors import (
    CheckoutValidationError,
    OrderNumberConflictError,
    StaleCartError,
)
from orders.stores.interfaces import InventoryOutboxStore, OrderStore

logger = logging.getLogger(__name__)


class Redirect(Enum):
    """Where the shopper goes after submitting the checkout form."""

    CART = "cart"
    CONFIRMATION = "confirmation"


@dataclass(frozen=True)
class CheckoutResult:
    redirect: Redirect
    order: Order | None = None

    @property
    def order_number(self) -> OrderNumber | None:
        return self.order.order_number if self.order else None


class CheckoutService:
    """Service for submitting a cart as a bank-transfer order."""

    def __init__(
        self,
        event_store: EventStore,
        order_store: OrderStore,
        outbox: InventoryOutboxStore,
        order_number_prefix: str = "BE",
        max_order_number_attempts: int = 3,
    ) -> None:
        self._events = event_store
        self._orders = order_store
        self._outbox = outbox
        self._prefix = order_number_prefix
        self._max_attempts = max(1, max_order_number_attempts)

    def submit(self, contact: ContactInfo, cart: Cart) -> CheckoutResult:
        """Place an order for the cart contents and clear the cart.

        The cart is left untouched on every failure.

        Raises:
            CheckoutValidationError: If name or email is invalid.
            StaleCartError: If a line no longer matches the catalog.
            PersistenceError: If the order could not be stored.
        """
        field_errors = contact.field_errors()
        if field_errors:
            raise CheckoutValidationError(field_errors)

        if cart.is_empty():
            return CheckoutResult(redirect=Redirect.CART)

        snapshot = cart.snapshot()
        self._ensure_fresh(snapshot)

        order = self._place_order(contact.normalized(), snapshot)
        self._decrement_inventory(order, snapshot)

        cart.clear()
        logger.info(
            "Order %s placed: %d tickets, total %s",
            order.order_number,
            snapshot.total_item_count(),
            order.total_amount,
        )
        return CheckoutResult(redirect=Redirect.CONFIRMATION, order=order)

    def _ensure_fresh(self, cart: Cart) -> None:
        current = self._events.get_ticket_categories(line.ticket_category_id for line in cart)
        stale = []
        for line in cart:
            category = current.get(line.ticket_category_id)
            if (
                category is None
                or category.available_quantity.value < line.quantity
                or category.price != line.unit_price
            ):
                stale.append(str(line.ticket_category_id))
        if stale:
            logger.info("Checkout refused, stale cart lines: %s", ", ".join(stale))
            raise StaleCartError(stale)

    def _place_order(self, contact: ContactInfo, cart: Cart) -> Order:
        items = [_to_new_item(line) for line in cart]
        total = cart.total_price()

        for attempt in range(1, self._max_attempts + 1):
            order_number = OrderNumber.generate(self._prefix)
            try:
                with self._orders.atomic():
                    order = self._orders.insert_order(
                        NewOrder(order_number=order_number, contact=contact, total_amount=total)
                    )
                    self._orders.insert_order_items(order.id, items)
                return order
            except OrderNumberConflictError:
                logger.warning(
                    "Order number %s already taken (attempt %d of %d)",
                    order_number,
                    attempt,
                    self._max_attempts,
                )
            except PersistenceError:
                logger.exception("Could not store order %s", order_number)
                raise

        logger.error("No free order number after %d attempts", self._max_attempts)
        raise PersistenceError("insert order", transient=True)

    def _decrement_inventory(self, order: Order, cart: Cart) -> None:
        for line in cart:
            try:
                applied = self._events.decrement_available_quantity(
                    line.ticket_category_id, line.quantity
                )
                error = "" if applied else "ticket category not found"
            except PersistenceError as exc:
                applied, error = False, str(exc)

            if applied:
                continue
            logger.warning(
                "Inventory not decremented for ticket category %s (order %s, amount %d): %s",
                line.ticket_category_id,
                order.order_number,
                line.quantity,
                error,
            )
            self._defer_decrement(order, line, error)

    def _defer_decrement(self, order: Order, line: CartLineItem, error: str) -> None:
        try:
            self._outbox.record(order.id, line.ticket_category_id, line.quantity, error)
        except PersistenceError:
            logger.exception(
                "Could not queue inventory adjustment for ticket category %s (order %s)",
                line.ticket_category_id,
                order.order_number,
            )


def _to_new_item(line: CartLineItem) -> NewOrderItem:
    return NewOrderItem(
        ticket_category_id=line.ticket_category_id,
        quantity=line.quantity,
        unit_price=line.unit_price,
        subtotal=line.subtotal,
    )
