"""Repository implementations for infrastructure layer."""

from .notification_event_repository import NotificationEventRepository
from .project_repository import ProjectRepository, ProjectResourceRepository
from .user_project_notification_repository import UserProjectNotificationRepository
from .user_repository import UserRepository

__all__ = [
    "NotificationEventRepository",
    "ProjectRepository",
    "ProjectResourceRepository",
    "UserProjectNotificationRepository",
    "UserRepository",
]
