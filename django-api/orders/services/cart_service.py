"""Cart operations applied to the shopper's own cart instance."""

from events.services.event_service import EventService, parse_ticket_category_id
from orders.domain import Cart, CartLineItem


class CartService:
    """Applies one shopper intent at a time to a cart it is handed."""

    def __init__(self, event_service: EventService) -> None:
        self._event_service = event_service

    def add_ticket(self, cart: Cart, ticket_category_id: str, quantity: int) -> CartLineItem | None:
        """Snapshot a ticket category from the catalog and add it to the cart.

        Returns the resulting line, or None when the category is sold out and
        was not added.

        Raises:
            InvalidTicketCategoryIdError: If the ID is not a valid UUID.
            TicketCategoryNotFoundError: If the ticket category does not exist.
        """
        ticket_category = self._event_service.get_ticket_category(ticket_category_id)
        cart.add(CartLineItem.from_ticket_category(ticket_category, quantity))
        return cart.get(ticket_category.id)

    def remove_ticket(self, cart: Cart, ticket_category_id: str) -> None:
        cart.remove(parse_ticket_category_id(ticket_category_id))

    def set_quantity(self, cart: Cart, ticket_category_id: str, quantity: int) -> CartLineItem | None:
        parsed = parse_ticket_category_id(ticket_category_id)
        cart.set_quantity(parsed, quantity)
        return cart.get(parsed)
