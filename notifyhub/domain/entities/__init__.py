"""Domain entities exposed by the application."""

from .enums import EventType, RequestState, ResourceType, State
from .notification_event import NotificationEvent, NotificationMail
from .project import Commit, Posting, Project, PullRequest
from .user import ANONYMOUS_USER_ID, User
from .user_project_notification import UserProjectNotification

__all__ = [
    "ANONYMOUS_USER_ID",
    "Commit",
    "EventType",
    "NotificationEvent",
    "NotificationMail",
    "Posting",
    "Project",
    "PullRequest",
    "RequestState",
    "ResourceType",
    "State",
    "User",
    "UserProjectNotification",
]
