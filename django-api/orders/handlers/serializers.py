"""Serializers for request input and for order/cart API responses."""

from rest_framework import serializers


class AddCartItemSerializer(serializers.Serializer):
    ticket_category_id = serializers.CharField()
    quantity = serializers.IntegerField(default=1, min_value=1)


class SetQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField()


class ContactSerializer(serializers.Serializer):
    """Raw checkout form. Field rules are enforced by the checkout service."""

    name = serializers.CharField(allow_blank=True, default="")
    email = serializers.CharField(allow_blank=True, default="")
    phone = serializers.CharField(allow_blank=True, allow_null=True, required=False)


class CartLineItemSerializer(serializers.Serializer):
    """Serializer for CartLineItem domain model."""

    ticket_category_id = serializers.SerializerMethodField()
    event_id = serializers.SerializerMethodField()
    city = serializers.CharField()
    venue = serializers.CharField()
    date = serializers.DateTimeField()
    category_name = serializers.CharField()
    unit_price = serializers.SerializerMethodField()
    quantity = serializers.IntegerField()
    available_quantity = serializers.IntegerField()
    subtotal = serializers.SerializerMethodField()

    def get_ticket_category_id(self, obj) -> str:
        return str(obj.ticket_category_id)

    def get_event_id(self, obj) -> str:
        return str(obj.event_id)

    def get_unit_price(self, obj) -> str:
        return str(obj.unit_price)

    def get_subtotal(self, obj) -> str:
        return str(obj.subtotal)


class CartSerializer(serializers.Serializer):
    """Serializer for the Cart with derived totals."""

    lines = CartLineItemSerializer(many=True)
    total_price = serializers.SerializerMethodField()
    total_item_count = serializers.SerializerMethodField()

    def get_total_price(self, obj) -> str:
        return str(obj.total_price())

    def get_total_item_count(self, obj) -> int:
        return obj.total_item_count()


class OrderItemDetailSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    unit_price = serializers.SerializerMethodField()
    subtotal = serializers.SerializerMethodField()
    category_name = serializers.CharField()
    city = serializers.CharField()
    venue = serializers.CharField()
    date = serializers.DateTimeField()

    def get_unit_price(self, obj) -> str:
        return str(obj.unit_price)

    def get_subtotal(self, obj) -> str:
        return str(obj.subtotal)


class OrderDetailSerializer(serializers.Serializer):
    """Serializer for OrderDetail with bank transfer instructions.

    Expects ``bank_transfer`` (account holder, IBAN, BIC) in the context.
    """

    order_number = serializers.SerializerMethodField()
    customer_name = serializers.CharField()
    customer_email = serializers.CharField()
    customer_phone = serializers.CharField(allow_null=True)
    total_amount = serializers.SerializerMethodField()
    status = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    items = OrderItemDetailSerializer(many=True)
    payment = serializers.SerializerMethodField()

    def get_order_number(self, obj) -> str:
        return str(obj.order_number)

    def get_total_amount(self, obj) -> str:
        return str(obj.total_amount)

    def get_status(self, obj) -> str:
        return obj.status.value

    def get_payment(self, obj) -> dict:
        bank = self.context.get("bank_transfer", {})
        return {
            "method": "bank_transfer",
            "account_holder": bank.get("account_holder", ""),
            "iban": bank.get("iban", ""),
            "bic": bank.get("bic", ""),
            "reference": str(obj.order_number),
            "amount": str(obj.total_amount),
        }
