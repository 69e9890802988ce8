"""Serializers for transforming catalog domain models to API responses."""

from rest_framework import serializers


class TicketCategorySerializer(serializers.Serializer):
    """Serializer for TicketCategory domain model."""

    id = serializers.SerializerMethodField()
    event_id = serializers.SerializerMethodField()
    category_name = serializers.CharField()
    price = serializers.SerializerMethodField()
    available_quantity = serializers.SerializerMethodField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_event_id(self, obj) -> str:
        return str(obj.event_id)

    def get_price(self, obj) -> str:
        return str(obj.price)

    def get_available_quantity(self, obj) -> int:
        return obj.available_quantity.value


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    city = serializers.CharField()
    venue = serializers.CharField()
    date = serializers.DateTimeField()
    ticket_categories = TicketCategorySerializer(many=True)

    def get_id(self, obj) -> str:
        return str(obj.id)
