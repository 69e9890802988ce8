from django.contrib import admin

from events.models import Event, TicketCategory


class TicketCategoryInline(admin.TabularInline):
    model = TicketCategory
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["city", "venue", "date"]
    search_fields = ["city", "venue"]
    inlines = [TicketCategoryInline]


@admin.register(TicketCategory)
class TicketCategoryAdmin(admin.ModelAdmin):
    list_display = ["category_name", "event", "price", "available_quantity"]
    list_filter = ["event"]
