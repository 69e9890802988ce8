"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

import uuid

from django.core.validators import MinValueValidator
from django.db import models

from events.models import TicketCategory


class Order(models.Model):
    """Persistence model for orders."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        CONFIRMED = "confirmed", "Confirmed"
        CANCELLED = "cancelled", "Cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=64, unique=True)
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(max_length=255)
    customer_phone = models.CharField(max_length=50, blank=True, null=True)
    total_amount = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0)]
    )
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.order_number


class OrderItem(models.Model):
    """Persistence model for order items."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    ticket_category = models.ForeignKey(
        TicketCategory, on_delete=models.PROTECT, related_name="order_items"
    )
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    subtotal = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.order.order_number} - {self.ticket_category.category_name} x{self.quantity}"


class InventoryAdjustment(models.Model):
    """Outbox of inventory decrements that failed at checkout."""

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPLIED = "applied", "Applied"

    order = models.ForeignKey(
        Order, on_delete=models.CASCADE, related_name="inventory_adjustments"
    )
    ticket_category = models.ForeignKey(
        TicketCategory, on_delete=models.CASCADE, related_name="inventory_adjustments"
    )
    amount = models.PositiveIntegerField()
    status = models.CharField(
        max_length=16, choices=Status.choices, default=Status.PENDING
    )
    attempts = models.PositiveIntegerField(default=0)
    last_error = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "inventory_adjustments"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="inventory_a_status_3c8e1f_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ticket_category_id} -{self.amount} ({self.status})"
