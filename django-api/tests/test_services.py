"""Unit tests for catalog, cart, order and inventory replay services.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from events.domain import Quantity
from events.domain.errors import InvalidTicketCategoryIdError, TicketCategoryNotFoundError
from events.services.event_service import EventService
from orders.domain import Cart, ContactInfo, OrderId
from orders.domain.errors import OrderNotFoundError
from orders.services.cart_service import CartService
from orders.services.checkout_service import CheckoutService
from orders.services.inventory_sync_service import InventorySyncService
from orders.services.order_service import OrderService


class TestEventService:
    """Tests for EventService."""

    def test_list_events_orders_by_date(self, event_store, make_category):
        later = make_category(city="Lyon", date=datetime(2027, 3, 1, tzinfo=timezone.utc))
        earlier = make_category(city="Paris")
        event_store.categories = {later.id: later, earlier.id: earlier}

        events = EventService(event_store).list_events()

        assert [event.city for event in events] == ["Paris", "Lyon"]
        assert events[0].ticket_categories == (earlier,)

    def test_get_ticket_category_invalid_id_raises_error(self, event_store):
        """get_ticket_category raises InvalidTicketCategoryIdError for malformed UUID."""
        with pytest.raises(InvalidTicketCategoryIdError):
            EventService(event_store).get_ticket_category("T1")

    def test_get_ticket_category_not_found_raises_error(self, event_store):
        """get_ticket_category raises TicketCategoryNotFoundError when store returns None."""
        with pytest.raises(TicketCategoryNotFoundError):
            EventService(event_store).get_ticket_category(str(uuid4()))


class TestCartService:
    """Tests for CartService."""

    @pytest.fixture
    def cart_service(self, event_store) -> CartService:
        return CartService(EventService(event_store))

    def test_add_ticket_snapshots_catalog(self, cart_service, event_store, make_category):
        category = make_category(price="45.00", available_quantity=5)
        event_store.categories[category.id] = category
        cart = Cart()

        line = cart_service.add_ticket(cart, str(category.id), 2)

        assert line.quantity == 2
        assert line.unit_price == category.price
        assert (line.city, line.venue, line.category_name) == (
            "Paris",
            "Accor Arena",
            "Category 1",
        )

    def test_add_sold_out_ticket_returns_none(self, cart_service, event_store, make_category):
        category = make_category(available_quantity=0)
        event_store.categories[category.id] = category
        cart = Cart()
        assert cart_service.add_ticket(cart, str(category.id), 1) is None
        assert cart.is_empty()

    def test_add_unknown_ticket_raises_error(self, cart_service):
        with pytest.raises(TicketCategoryNotFoundError):
            cart_service.add_ticket(Cart(), str(uuid4()), 1)

    def test_set_quantity_clamps(self, cart_service, make_category, make_line):
        category = make_category(available_quantity=5)
        cart = Cart([make_line(category)])
        assert cart_service.set_quantity(cart, str(category.id), 99).quantity == 5

    def test_remove_with_invalid_id_raises_error(self, cart_service):
        with pytest.raises(InvalidTicketCategoryIdError):
            cart_service.remove_ticket(Cart(), "not-a-uuid")


class TestOrderService:
    """Tests for OrderService."""

    def test_get_order_returns_nested_items(
        self, event_store, order_store, outbox, make_category, make_line
    ):
        category = make_category()
        event_store.categories[category.id] = category
        result = CheckoutService(event_store, order_store, outbox).submit(
            ContactInfo(name="Ada", email="ada@example.com"), Cart([make_line(category, 2)])
        )

        order = OrderService(order_store).get_order(result.order_number.value)

        assert order.order_number == result.order_number
        [item] = order.items
        assert (item.quantity, item.category_name, item.city) == (2, "Category 1", "Paris")

    def test_unknown_order_raises_not_found(self, order_store):
        with pytest.raises(OrderNotFoundError):
            OrderService(order_store).get_order("BE-unknown-AAAAAA")

    def test_malformed_order_number_raises_not_found(self, order_store):
        with pytest.raises(OrderNotFoundError):
            OrderService(order_store).get_order("")


class TestInventorySyncService:
    """Tests for replaying the inventory outbox."""

    def test_replay_applies_pending_adjustments(self, event_store, outbox, make_category):
        category = make_category(available_quantity=5)
        event_store.categories[category.id] = category
        outbox.record(OrderId(uuid4()), category.id, 2, "timeout")

        report = InventorySyncService(event_store, outbox).replay_pending()

        assert (report.applied, report.failed) == (1, 0)
        assert outbox.pending == {}
        assert event_store.categories[category.id].available_quantity == Quantity(3)

    def test_replay_keeps_failing_adjustments_pending(self, event_store, outbox, make_category):
        category = make_category()
        event_store.categories[category.id] = category
        event_store.failing_decrements.add(category.id)
        outbox.record(OrderId(uuid4()), category.id, 1, "timeout")

        report = InventorySyncService(event_store, outbox).replay_pending()

        assert (report.applied, report.failed) == (0, 1)
        [adjustment] = outbox.pending.values()
        assert adjustment.attempts == 1
