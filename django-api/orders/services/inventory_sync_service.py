"""Replays inventory decrements that failed during checkout."""

import logging
from dataclasses import dataclass

from events.domain.errors import PersistenceError
from events.stores.interfaces import EventStore
from orders.stores.interfaces import InventoryOutboxStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayReport:
    applied: int
    failed: int


class InventorySyncService:
    """Applies pending outbox adjustments to the catalog inventory."""

    def __init__(self, event_store: EventStore, outbox: InventoryOutboxStore) -> None:
        self._events = event_store
        self._outbox = outbox

    def replay_pending(self, limit: int = 100) -> ReplayReport:
        applied = failed = 0
        for adjustment in self._outbox.list_pending(limit):
            try:
                ok = self._events.decrement_available_quantity(
                    adjustment.ticket_category_id, adjustment.amount
                )
                error = "" if ok else "ticket category not found"
            except PersistenceError as exc:
                ok, error = False, str(exc)

            if ok:
                self._outbox.mark_applied(adjustment.id)
                applied += 1
            else:
                logger.warning(
                    "Inventory adjustment %d still failing after %d attempts: %s",
                    adjustment.id,
                    adjustment.attempts + 1,
                    error,
                )
                self._outbox.mark_failed(adjustment.id, error)
                failed += 1

        logger.info("Inventory replay finished: %d applied, %d failed", applied, failed)
        return ReplayReport(applied=applied, failed=failed)
