from orders.domain.cart import Cart, CartLineItem
from orders.domain.models import (
    InventoryAdjustment,
    NewOrder,
    NewOrderItem,
    Order,
    OrderDetail,
    OrderItem,
    OrderItemDetail,
)
from orders.domain.value_objects import ContactInfo, OrderId, OrderNumber, OrderStatus

__all__ = [
    "Cart",
    "CartLineItem",
    "ContactInfo",
    "InventoryAdjustment",
    "NewOrder",
    "NewOrderItem",
    "Order",
    "OrderDetail",
    "OrderId",
    "OrderItem",
    "OrderItemDetail",
    "OrderNumber",
    "OrderStatus",
]
