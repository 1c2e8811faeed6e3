"""Domain entity describing a per-project notification preference."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import EventType


@dataclass
class UserProjectNotification:
    """Whether ``user_id`` wants ``event_type`` notifications for ``project_id``."""

    id: int | None
    user_id: int
    project_id: int
    event_type: EventType
    allowed: bool


__all__ = ["UserProjectNotification"]
