"""Shopping cart held for the duration of a shopper's session.

A cart holds at most one line per ticket category. Quantities are clamped into
``[1, available_quantity]``; out of range requests are never rejected.
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Self

from events.domain import EventId, Money, TicketCategory, TicketCategoryId


def _clamp(quantity: int, available_quantity: int) -> int:
    return min(max(1, quantity), available_quantity)


@dataclass(frozen=True)
class CartLineItem:
    """One ticket category selection with the snapshot taken when it was added."""

    ticket_category_id: TicketCategoryId
    event_id: EventId
    city: str
    venue: str
    date: datetime
    category_name: str
    unit_price: Money
    quantity: int
    available_quantity: int

    @classmethod
    def from_ticket_category(cls, ticket_category: TicketCategory, quantity: int) -> Self:
        return cls(
            ticket_category_id=ticket_category.id,
            event_id=ticket_category.event_id,
            city=ticket_category.event.city,
            venue=ticket_category.event.venue,
            date=ticket_category.event.date,
            category_name=ticket_category.category_name,
            unit_price=ticket_category.price,
            quantity=quantity,
            available_quantity=ticket_category.available_quantity.value,
        )

    @property
    def subtotal(self) -> Money:
        return self.unit_price.times(self.quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticket_category_id": str(self.ticket_category_id),
            "event_id": str(self.event_id),
            "city": self.city,
            "venue": self.venue,
            "date": self.date.isoformat(),
            "category_name": self.category_name,
            "unit_price": str(self.unit_price.amount),
            "quantity": self.quantity,
            "available_quantity": self.available_quantity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            ticket_category_id=TicketCategoryId.from_string(data["ticket_category_id"]),
            event_id=EventId.from_string(data["event_id"]),
            city=data["city"],
            venue=data["venue"],
            date=datetime.fromisoformat(data["date"]),
            category_name=data["category_name"],
            unit_price=Money(Decimal(data["unit_price"])),
            quantity=int(data["quantity"]),
            available_quantity=int(data["available_quantity"]),
        )


class Cart:
    """Ordered collection of line items keyed by ticket category."""

    def __init__(self, lines: tuple[CartLineItem, ...] | list[CartLineItem] = ()) -> None:
        self._lines: dict[TicketCategoryId, CartLineItem] = {}
        for line in lines:
            self.add(line)

    def add(self, item: CartLineItem) -> None:
        """Add a line, merging into an existing line for the same ticket category.

        The incoming quantity counts as at least 1. On merge the existing line's
        availability snapshot caps the quantity, even if the incoming item
        carries a newer snapshot.
        """
        requested = max(1, item.quantity)
        existing = self._lines.get(item.ticket_category_id)
        if existing is not None:
            self._lines[item.ticket_category_id] = replace(
                existing,
                quantity=_clamp(existing.quantity + requested, existing.available_quantity),
            )
            return
        if item.available_quantity < 1:
            return
        self._lines[item.ticket_category_id] = replace(
            item, quantity=_clamp(item.quantity, item.available_quantity)
        )

    def remove(self, ticket_category_id: TicketCategoryId) -> None:
        self._lines.pop(ticket_category_id, None)

    def set_quantity(self, ticket_category_id: TicketCategoryId, quantity: int) -> None:
        line = self._lines.get(ticket_category_id)
        if line is None:
            return
        self._lines[ticket_category_id] = replace(
            line, quantity=_clamp(quantity, line.available_quantity)
        )

    def clear(self) -> None:
        self._lines.clear()

    def get(self, ticket_category_id: TicketCategoryId) -> CartLineItem | None:
        return self._lines.get(ticket_category_id)

    @property
    def lines(self) -> tuple[CartLineItem, ...]:
        return tuple(self._lines.values())

    def is_empty(self) -> bool:
        return not self._lines

    def total_price(self) -> Money:
        return Money(sum((line.subtotal.amount for line in self._lines.values()), Decimal("0")))

    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def snapshot(self) -> "Cart":
        return Cart(self.lines)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self._lines)

    def to_dict(self) -> dict[str, Any]:
        return {"lines": [line.to_dict() for line in self._lines.values()]}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Self:
        if not data:
            return cls()
        return cls([CartLineItem.from_dict(line) for line in data.get("lines", [])])
