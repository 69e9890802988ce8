from django.urls import path

from orders.handlers import (
    CartItemDetailView,
    CartItemListView,
    CartView,
    CheckoutView,
    OrderDetailView,
)

urlpatterns = [
    path("cart", CartView.as_view(), name="cart"),
    path("cart/items", CartItemListView.as_view(), name="cart-item-list"),
    path(
        "cart/items/<str:ticket_category_id>",
        CartItemDetailView.as_view(),
        name="cart-item-detail",
    ),
    path("checkout", CheckoutView.as_view(), name="checkout"),
    path("orders/<str:order_number>", OrderDetailView.as_view(), name="order-detail"),
]
