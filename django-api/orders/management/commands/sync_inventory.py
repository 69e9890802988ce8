from django.core.management.base import BaseCommand

from events.stores.django_store import DjangoEventStore
from orders.services.inventory_sync_service import InventorySyncService
from orders.stores.django_store import DjangoInventoryOutboxStore


class Command(BaseCommand):
    help = "Apply inventory decrements that failed during checkout."

    def add_arguments(self, parser):
        parser.add_argument("--limit", type=int, default=100)

    def handle(self, *args, **options):
        service = InventorySyncService(DjangoEventStore(), DjangoInventoryOutboxStore())
        report = service.replay_pending(limit=options["limit"])
        self.stdout.write(
            self.style.SUCCESS(f"Applied {report.applied} adjustments, {report.failed} failed")
        )
