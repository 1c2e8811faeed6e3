"""Persistence helpers for per-project notification preferences."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notifyhub.domain.entities import EventType, Project, UserProjectNotification
from notifyhub.infrastructure.models import UserProjectNotificationModel


class UserProjectNotificationRepository:
    """Answer and record whether users want a category of notification.

    Users receive every category unless they explicitly turned it off for the
    project.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def is_enabled(self, user_id: int, project: Project, event_type: EventType) -> bool:
        model = self._get_model(user_id, project.id, event_type)
        if model is None:
            return True
        return bool(model.allowed)

    def set_enabled(
        self,
        user_id: int,
        project_id: int,
        event_type: EventType,
        *,
        allowed: bool,
    ) -> UserProjectNotification:
        model = self._get_model(user_id, project_id, event_type)
        if model is None:
            model = UserProjectNotificationModel(
                user_id=user_id, project_id=project_id, event_type=event_type
            )
        model.allowed = allowed
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _get_model(
        self, user_id: int, project_id: int | None, event_type: EventType
    ) -> UserProjectNotificationModel | None:
        return (
            self.session.query(UserProjectNotificationModel)
            .filter(UserProjectNotificationModel.user_id == user_id)
            .filter(UserProjectNotificationModel.project_id == project_id)
            .filter(UserProjectNotificationModel.event_type == event_type)
            .one_or_none()
        )

    @staticmethod
    def _to_entity(model: UserProjectNotificationModel) -> UserProjectNotification:
        return UserProjectNotification(
            id=model.id,
            user_id=model.user_id,
            project_id=model.project_id,
            event_type=model.event_type,
            allowed=bool(model.allowed),
        )


__all__ = ["UserProjectNotificationRepository"]
