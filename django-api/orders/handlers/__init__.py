from orders.handlers.views import (
    CartItemDetailView,
    CartItemListView,
    CartView,
    CheckoutView,
    OrderDetailView,
)

__all__ = [
    "CartItemDetailView",
    "CartItemListView",
    "CartView",
    "CheckoutView",
    "OrderDetailView",
]
