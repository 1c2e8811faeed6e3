"""Collaborator interfaces consumed by the notification event coalescer.

The coalescer never queries storage directly; it receives implementations of
these protocols. SQLAlchemy-backed implementations live in
:mod:`notifyhub.infrastructure.repositories`.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from datetime import datetime
from typing import Protocol

from .entities import EventType, NotificationEvent, Project, ResourceType


class EventStore(Protocol):
    """Persistence operations required to coalesce notification events."""

    def find_recent_sibling(
        self,
        resource_type: ResourceType,
        resource_id: str,
        *,
        after: datetime,
    ) -> NotificationEvent | None:
        """Return the highest-id event on the resource created strictly after ``after``."""

    def delete(self, event_id: int) -> None:
        ...

    def save(self, event: NotificationEvent) -> NotificationEvent:
        """Persist ``event`` and return it with its assigned identifier."""

    def delete_all_for(self, resource_type: ResourceType, resource_id: str) -> int:
        ...

    def atomic(self) -> AbstractContextManager[None]:
        """Commit everything done inside the block, or roll it all back on error."""


class ResourceLocator(Protocol):
    def resolve(self, resource_type: ResourceType, resource_id: str) -> Project | None:
        """Return the project owning the resource, or ``None`` if it does not exist."""


class PreferenceOracle(Protocol):
    def is_enabled(self, user_id: int, project: Project, event_type: EventType) -> bool:
        """Return whether ``user_id`` wants ``event_type`` notifications for ``project``."""


__all__ = ["EventStore", "PreferenceOracle", "ResourceLocator"]
