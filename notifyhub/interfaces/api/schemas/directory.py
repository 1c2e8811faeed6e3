"""Schemas for users, projects, resources and notification preferences."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from notifyhub.application.use_cases.notifications.mentions import LOGIN_ID_PATTERN
from notifyhub.domain.entities import EventType


class UserCreate(BaseModel):
    login_id: str = Field(..., max_length=50, pattern=f"^{LOGIN_ID_PATTERN}$")
    name: str = Field(..., max_length=100)
    email: str | None = Field(default=None, max_length=120)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    login_id: str
    name: str
    email: str | None = None


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ProjectRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ResourceRegistration(BaseModel):
    project_id: int = Field(..., ge=1)


class NotificationPreferenceUpdate(BaseModel):
    allowed: bool


class NotificationPreferenceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    project_id: int
    event_type: EventType
    allowed: bool


__all__ = [
    "NotificationPreferenceRead",
    "NotificationPreferenceUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ResourceRegistration",
    "UserCreate",
    "UserRead",
]
