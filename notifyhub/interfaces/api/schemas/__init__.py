from .directory import (
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    ProjectCreate,
    ProjectRead,
    ResourceRegistration,
    UserCreate,
    UserRead,
)
from .notification_event import (
    NotificationEventCreate,
    NotificationEventDeleteResult,
    NotificationEventRead,
)

__all__ = [
    "NotificationEventCreate",
    "NotificationEventDeleteResult",
    "NotificationEventRead",
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ResourceRegistration",
    "UserCreate",
    "UserRead",
]
