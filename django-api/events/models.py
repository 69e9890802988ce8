"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.core.validators import MinValueValidator
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    city = models.CharField(max_length=255)
    venue = models.CharField(max_length=255)
    date = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["date"]
        indexes = [
            models.Index(fields=["date"], name="events_date_9f2c1e_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.city} - {self.venue}"


class TicketCategory(models.Model):
    """Persistence model for ticket categories."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="ticket_categories"
    )
    category_name = models.CharField(max_length=100)
    price = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    available_quantity = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "ticket_categories"
        ordering = ["created_at"]
        verbose_name_plural = "ticket categories"
        indexes = [
            models.Index(fields=["event"], name="ticket_cate_event_i_4b7d2a_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.category_name} - {self.price}"
