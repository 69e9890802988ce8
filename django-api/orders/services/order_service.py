"""Order lookups for the confirmation view."""

from orders.domain import OrderDetail, OrderNumber
from orders.domain.errors import OrderNotFoundError
from orders.stores.interfaces import OrderStore


class OrderService:
    """Service for reading placed orders."""

    def __init__(self, store: OrderStore) -> None:
        self._store = store

    def get_order(self, order_number: str) -> OrderDetail:
        """Return an order with its items by order number.

        Raises:
            OrderNotFoundError: If no order has this number.
        """
        try:
            parsed = OrderNumber(order_number)
        except ValueError as exc:
            raise OrderNotFoundError(order_number) from exc
        order = self._store.get_order_by_number(parsed)
        if order is None:
            raise OrderNotFoundError(order_number)
        return order
