from events.handlers.views import EventListView

__all__ = ["EventListView"]
