"""Aggregate application use cases."""

from .notifications import add_notification_event, delete_notification_events_for

__all__ = ["add_notification_event", "delete_notification_events_for"]
