"""Pydantic models describing notification event payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from notifyhub.domain.entities import EventType, ResourceType


class NotificationEventCreate(BaseModel):
    """A raw event raised by the platform, before coalescing and filtering."""

    model_config = ConfigDict(extra="forbid")

    event_type: EventType
    resource_type: ResourceType
    resource_id: str = Field(..., min_length=1, max_length=64)
    sender_id: int
    old_value: str | None = None
    new_value: str | None = None
    receivers: list[int] = Field(default_factory=list)
    title: str | None = Field(default=None, max_length=255)
    message: str | None = None
    url_to_view: str | None = Field(default=None, max_length=255)
    mention_body: str | None = Field(
        default=None,
        description="Free text whose @mentions are added to the receivers",
    )

    def unique_receivers(self) -> set[int]:
        return set(self.receivers)


class NotificationEventRead(BaseModel):
    """Representation of a stored notification event."""

    id: int
    event_type: EventType
    resource_type: ResourceType
    resource_id: str
    sender_id: int
    old_value: str | None = None
    new_value: str | None = None
    created: datetime
    receivers: list[int] = Field(default_factory=list)
    title: str | None = None
    message: str | None = Field(default=None, description="Rendered message body")
    url_to_view: str | None = None


class NotificationEventDeleteResult(BaseModel):
    deleted: int


__all__ = [
    "NotificationEventCreate",
    "NotificationEventDeleteResult",
    "NotificationEventRead",
]
