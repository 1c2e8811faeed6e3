"""ORM models used by the application infrastructure."""

from .notification_event import (
    NotificationEventModel,
    NotificationMailModel,
    notification_event_receiver_table,
)
from .project import ProjectModel, ProjectResourceModel
from .user import UserModel
from .user_project_notification import UserProjectNotificationModel

__all__ = [
    "NotificationEventModel",
    "NotificationMailModel",
    "notification_event_receiver_table",
    "ProjectModel",
    "ProjectResourceModel",
    "UserModel",
    "UserProjectNotificationModel",
]
