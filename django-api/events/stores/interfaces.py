"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import Event, TicketCategory, TicketCategoryId


class EventStore(ABC):
    """Interface for catalog and inventory persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date ascending, with ticket categories."""
        ...

    @abstractmethod
    def get_ticket_category(
        self, ticket_category_id: TicketCategoryId
    ) -> TicketCategory | None:
        """Return a ticket category by ID, or None if not found."""
        ...

    @abstractmethod
    def get_ticket_categories(
        self, ticket_category_ids: Iterable[TicketCategoryId]
    ) -> dict[TicketCategoryId, TicketCategory]:
        """Return the ticket categories that exist among the given IDs."""
        ...

    @abstractmethod
    def decrement_available_quantity(
        self, ticket_category_id: TicketCategoryId, amount: int
    ) -> bool:
        """Atomically reduce available quantity by amount, flooring at zero.

        Returns False if the ticket category does not exist.
        """
        ...
