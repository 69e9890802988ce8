from django.urls import path

from events.handlers import EventListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
]
