from django.contrib import admin

from orders.models import InventoryAdjustment, Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ["ticket_category", "quantity", "unit_price", "subtotal"]


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ["order_number", "customer_name", "total_amount", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["order_number", "customer_name", "customer_email"]
    inlines = [OrderItemInline]


@admin.register(InventoryAdjustment)
class InventoryAdjustmentAdmin(admin.ModelAdmin):
    list_display = ["ticket_category", "order", "amount", "status", "attempts", "updated_at"]
    list_filter = ["status"]
