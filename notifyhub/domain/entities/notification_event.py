"""Domain entities describing notification events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .enums import EventType, ResourceType


@dataclass
class NotificationMail:
    """Outbound mail placeholder attached to every stored event."""

    id: int | None = None
    notification_event_id: int | None = None


@dataclass
class NotificationEvent:
    """A change on a resource that users may be notified about.

    ``old_value`` and ``new_value`` are free-form strings whose meaning depends
    on ``event_type`` (state names, assignee ids, rendered comment text...).
    ``receivers`` holds user ids and is only narrowed once, at submission.
    """

    id: int | None
    event_type: EventType
    resource_type: ResourceType
    resource_id: str
    sender_id: int
    old_value: str | None = None
    new_value: str | None = None
    created: datetime | None = None
    receivers: set[int] = field(default_factory=set)
    title: str | None = None
    message: str | None = None
    url_to_view: str | None = None
    notification_mail: NotificationMail | None = None

    @property
    def resource_key(self) -> tuple[ResourceType, str]:
        """Return the ``(resource_type, resource_id)`` pair identifying the subject."""

        return (self.resource_type, self.resource_id)

    def is_net_zero(self) -> bool:
        """Return ``True`` when the event no longer describes any change."""

        return self.old_value == self.new_value


__all__ = ["NotificationEvent", "NotificationMail"]
