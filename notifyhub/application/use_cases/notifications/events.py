"""Use cases to raise, look up and clean up notification events.

Submissions for one resource are serialized by ``resource_locks``, a lock held
in this process only. Several workers sharing a database are not serialized by
it, and a READ COMMITTED transaction does not stop two of them from reading the
same sibling; run a single worker per database until submissions take a
database-level lock keyed on ``(resource_type, resource_id)``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from notifyhub.config import Settings, get_settings
from notifyhub.domain.entities import NotificationEvent, ResourceType
from notifyhub.infrastructure.repositories import (
    NotificationEventRepository,
    ProjectResourceRepository,
    UserProjectNotificationRepository,
    UserRepository,
)
from notifyhub.utils import now_in_app_timezone

from .coalescer import NotificationEventCoalescer
from .locks import KeyedLock
from .mentions import get_mentioned_users

# Shared by every coalescer in the process so that submissions for one resource
# are serialized regardless of which session raised them.
resource_locks = KeyedLock()


def build_coalescer(
    session: Session,
    *,
    settings: Settings | None = None,
    clock: Callable[[], datetime] | None = None,
) -> NotificationEventCoalescer:
    """Wire the SQLAlchemy repositories bound to ``session`` into a coalescer."""

    settings = settings or get_settings()
    return NotificationEventCoalescer(
        NotificationEventRepository(session),
        ProjectResourceRepository(session),
        UserProjectNotificationRepository(session),
        draft_window=settings.notification_draft_window,
        clock=clock or now_in_app_timezone,
        locks=resource_locks,
    )


def add_notification_event(
    session: Session,
    event: NotificationEvent,
    *,
    settings: Settings | None = None,
) -> NotificationEvent | None:
    """Coalesce and store ``event``; ``None`` means nothing was stored."""

    return build_coalescer(session, settings=settings).submit(event)


def notify_mentioned_users(
    session: Session,
    event: NotificationEvent,
    body: str | None,
    *,
    settings: Settings | None = None,
) -> NotificationEvent | None:
    """Add the users mentioned in ``body`` to the receivers of ``event`` and submit it."""

    mentioned = get_mentioned_users(body, UserRepository(session).get_by_login_id)
    event.receivers = set(event.receivers) | mentioned
    return add_notification_event(session, event, settings=settings)


def delete_notification_events_for(
    session: Session, resource_type: ResourceType, resource_id: str
) -> int:
    """Remove every event about a resource that is being deleted."""

    repository = NotificationEventRepository(session)
    with repository.atomic():
        return repository.delete_all_for(resource_type, resource_id)


def get_notification_event(session: Session, event_id: int) -> NotificationEvent:
    event = NotificationEventRepository(session).get(event_id)
    if event is None:
        raise ValueError("Notification event not found")
    return event


def list_notification_events_for_user(
    session: Session, user_id: int, *, limit: int | None = 50
) -> Sequence[NotificationEvent]:
    """Return the events addressed to ``user_id``, newest first."""

    return NotificationEventRepository(session).list_for_receiver(user_id, limit=limit)


__all__ = [
    "add_notification_event",
    "build_coalescer",
    "delete_notification_events_for",
    "get_notification_event",
    "list_notification_events_for_user",
    "notify_mentioned_users",
    "resource_locks",
]
