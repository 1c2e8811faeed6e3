"""Coalescing and recipient filtering for notification events."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from notifyhub.domain.entities import NotificationEvent, NotificationMail, Project
from notifyhub.domain.exceptions import ResourceNotFoundError
from notifyhub.domain.ports import EventStore, PreferenceOracle, ResourceLocator
from notifyhub.utils import now_in_app_timezone

from .locks import KeyedLock

logger = logging.getLogger(__name__)


class NotificationEventCoalescer:
    """Decide whether a new event is merged, cancelled, dropped or stored.

    An event raised by the same sender, with the same category, on the same
    resource as the most recent event stored within ``draft_window`` replaces
    that event: the older ``old_value`` is carried forward so ``A -> B`` followed
    by ``B -> C`` is stored as ``A -> C``, and ``A -> B`` followed by ``B -> A``
    leaves nothing behind. Surviving events are addressed only to receivers
    whose preferences allow the category for the owning project.

    Submissions for one resource are serialized through ``locks`` and run inside
    ``store.atomic()``, so the delete of a merged sibling and the insert of its
    replacement land together or not at all.
    """

    def __init__(
        self,
        store: EventStore,
        locator: ResourceLocator,
        preferences: PreferenceOracle,
        *,
        draft_window: timedelta,
        clock: Callable[[], datetime] = now_in_app_timezone,
        locks: KeyedLock | None = None,
    ) -> None:
        if draft_window < timedelta(0):
            raise ValueError("draft_window must not be negative")
        self._store = store
        self._locator = locator
        self._preferences = preferences
        self._draft_window = draft_window
        self._clock = clock
        self._locks = locks if locks is not None else KeyedLock()

    def submit(self, candidate: NotificationEvent) -> NotificationEvent | None:
        """Coalesce ``candidate`` with recent events and persist what remains.

        Returns the stored event, or ``None`` when the candidate cancelled out a
        previous event or no receiver wants it. Raises
        :class:`ResourceNotFoundError` when the event's resource does not exist.
        """

        if candidate.notification_mail is None:
            candidate.notification_mail = NotificationMail()

        with self._locks.hold(candidate.resource_key):
            now = self._clock()
            if candidate.created is None:
                candidate.created = now
            window_start = now - self._draft_window

            with self._store.atomic():
                if not self._merge_with_sibling(candidate, window_start):
                    return None

                project = self._resolve_project(candidate)
                receivers = self._filter_receivers(candidate, project)
                if not receivers:
                    logger.debug(
                        "Dropping %s on %s:%s, no receiver accepts it",
                        candidate.event_type.value,
                        candidate.resource_type.value,
                        candidate.resource_id,
                    )
                    return None

                candidate.receivers = receivers
                saved = self._store.save(candidate)

        logger.info(
            "Stored notification event %s (%s on %s:%s) for %d receiver(s)",
            saved.id,
            saved.event_type.value,
            saved.resource_type.value,
            saved.resource_id,
            len(saved.receivers),
        )
        return saved

    def _merge_with_sibling(
        self, candidate: NotificationEvent, window_start: datetime
    ) -> bool:
        """Fold the most recent matching event into ``candidate``.

        Returns ``False`` when the merge leaves no net change.
        """

        sibling = self._store.find_recent_sibling(
            candidate.resource_type, candidate.resource_id, after=window_start
        )
        if sibling is None or sibling.id is None:
            return True
        if (
            sibling.event_type != candidate.event_type
            or sibling.sender_id != candidate.sender_id
        ):
            return True

        candidate.old_value = sibling.old_value
        self._store.delete(sibling.id)
        logger.debug(
            "Merged notification event %s into new %s on %s:%s",
            sibling.id,
            candidate.event_type.value,
            candidate.resource_type.value,
            candidate.resource_id,
        )

        if candidate.is_net_zero():
            logger.debug(
                "Notification event on %s:%s cancelled out event %s",
                candidate.resource_type.value,
                candidate.resource_id,
                sibling.id,
            )
            return False
        return True

    def _resolve_project(self, candidate: NotificationEvent) -> Project:
        project = self._locator.resolve(candidate.resource_type, candidate.resource_id)
        if project is None:
            raise ResourceNotFoundError(candidate.resource_type, candidate.resource_id)
        return project

    def _filter_receivers(
        self, candidate: NotificationEvent, project: Project
    ) -> set[int]:
        return {
            receiver
            for receiver in candidate.receivers
            if self._preferences.is_enabled(receiver, project, candidate.event_type)
        }


__all__ = ["NotificationEventCoalescer"]
