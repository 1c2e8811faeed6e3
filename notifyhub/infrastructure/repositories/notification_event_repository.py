"""Persistence helpers for notification events."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy.orm import Session

from notifyhub.domain.entities import (
    NotificationEvent,
    NotificationMail,
    ResourceType,
)
from notifyhub.infrastructure.models import (
    NotificationEventModel,
    NotificationMailModel,
    UserModel,
    notification_event_receiver_table,
)
from notifyhub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)


class NotificationEventRepository:
    """Store :class:`NotificationEvent` objects.

    Mutating methods only flush; the surrounding :meth:`atomic` block (or the
    caller) owns the commit.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Commit the work done inside the block, rolling back on any error."""

        try:
            yield
        except Exception:
            self.session.rollback()
            raise
        self.session.commit()

    def get(self, event_id: int) -> NotificationEvent | None:
        model = self.session.get(NotificationEventModel, event_id)
        return self._to_entity(model) if model else None

    def find_recent_sibling(
        self,
        resource_type: ResourceType,
        resource_id: str,
        *,
        after: datetime,
    ) -> NotificationEvent | None:
        model = (
            self.session.query(NotificationEventModel)
            .filter(NotificationEventModel.resource_type == resource_type)
            .filter(NotificationEventModel.resource_id == resource_id)
            .filter(NotificationEventModel.created > ensure_app_naive_datetime(after))
            .order_by(NotificationEventModel.id.desc())
            .limit(1)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def list_for_receiver(
        self, user_id: int, *, limit: int | None = 50
    ) -> Sequence[NotificationEvent]:
        query = (
            self.session.query(NotificationEventModel)
            .join(
                notification_event_receiver_table,
                notification_event_receiver_table.c.notification_event_id
                == NotificationEventModel.id,
            )
            .filter(notification_event_receiver_table.c.user_id == user_id)
            .order_by(
                NotificationEventModel.created.desc(), NotificationEventModel.id.desc()
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_for_resource(
        self, resource_type: ResourceType, resource_id: str
    ) -> Sequence[NotificationEvent]:
        query = (
            self.session.query(NotificationEventModel)
            .filter(NotificationEventModel.resource_type == resource_type)
            .filter(NotificationEventModel.resource_id == resource_id)
            .order_by(NotificationEventModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def save(self, event: NotificationEvent) -> NotificationEvent:
        model = NotificationEventModel()
        self._apply_entity_to_model(model, event)
        model.receivers = self._load_receivers(event.receivers)
        model.notification_mail = NotificationMailModel()
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, event_id: int) -> None:
        model = self.session.get(NotificationEventModel, event_id)
        if model is None:
            msg = f"Notification event with id {event_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def delete_all_for(self, resource_type: ResourceType, resource_id: str) -> int:
        models = (
            self.session.query(NotificationEventModel)
            .filter(NotificationEventModel.resource_type == resource_type)
            .filter(NotificationEventModel.resource_id == resource_id)
            .all()
        )
        for model in models:
            self.session.delete(model)
        self.session.flush()
        if models:
            logger.info(
                "Deleted %d notification event(s) for %s:%s",
                len(models),
                resource_type.value,
                resource_id,
            )
        return len(models)

    def _load_receivers(self, user_ids: set[int]) -> list[UserModel]:
        if not user_ids:
            return []
        users = self.session.query(UserModel).filter(UserModel.id.in_(user_ids)).all()
        missing = set(user_ids) - {user.id for user in users}
        if missing:
            msg = f"Unknown receiver ids: {sorted(missing)}"
            raise ValueError(msg)
        return users

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationEventModel, event: NotificationEvent
    ) -> None:
        model.created = ensure_app_naive_datetime(
            event.created or now_in_app_timezone()
        )
        model.title = event.title
        model.message = event.message
        model.sender_id = event.sender_id
        model.url_to_view = event.url_to_view
        model.resource_type = event.resource_type
        model.resource_id = event.resource_id
        model.event_type = event.event_type
        model.old_value = event.old_value
        model.new_value = event.new_value

    @staticmethod
    def _to_entity(model: NotificationEventModel) -> NotificationEvent:
        mail = model.notification_mail
        return NotificationEvent(
            id=model.id,
            event_type=model.event_type,
            resource_type=model.resource_type,
            resource_id=model.resource_id,
            sender_id=model.sender_id,
            old_value=model.old_value,
            new_value=model.new_value,
            created=ensure_app_timezone(model.created),
            receivers={user.id for user in model.receivers},
            title=model.title,
            message=model.message,
            url_to_view=model.url_to_view,
            notification_mail=NotificationMail(
                id=mail.id, notification_event_id=mail.notification_event_id
            )
            if mail is not None
            else None,
        )


__all__ = ["NotificationEventRepository"]
