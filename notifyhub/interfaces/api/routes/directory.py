"""Endpoints maintaining users, projects, resource ownership and preferences."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from notifyhub.domain.entities import EventType, Project, ResourceType, User
from notifyhub.infrastructure.database import get_db
from notifyhub.infrastructure.repositories import (
    ProjectRepository,
    ProjectResourceRepository,
    UserProjectNotificationRepository,
    UserRepository,
)
from notifyhub.interfaces.api.schemas import (
    NotificationPreferenceRead,
    NotificationPreferenceUpdate,
    ProjectCreate,
    ProjectRead,
    ResourceRegistration,
    UserCreate,
    UserRead,
)

router = APIRouter(tags=["directory"])


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    user = User(id=None, login_id=payload.login_id, name=payload.name, email=payload.email)
    try:
        created = UserRepository(db).create(user)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return UserRead.model_validate(created)


@router.post("/projects", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)) -> ProjectRead:
    created = ProjectRepository(db).create(Project(id=None, name=payload.name))
    return ProjectRead.model_validate(created)


@router.put("/resources/{resource_type}/{resource_id}", response_model=ProjectRead)
def register_resource(
    resource_type: ResourceType,
    resource_id: str,
    payload: ResourceRegistration,
    db: Session = Depends(get_db),
) -> ProjectRead:
    """Record which project owns a resource so its events can be addressed."""

    try:
        project = ProjectResourceRepository(db).register(
            resource_type, resource_id, payload.project_id
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return ProjectRead.model_validate(project)


@router.put(
    "/users/{user_id}/projects/{project_id}/notification-preferences/{event_type}",
    response_model=NotificationPreferenceRead,
)
def update_notification_preference(
    user_id: int,
    project_id: int,
    event_type: EventType,
    payload: NotificationPreferenceUpdate,
    db: Session = Depends(get_db),
) -> NotificationPreferenceRead:
    if UserRepository(db).get(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if ProjectRepository(db).get(project_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")

    preference = UserProjectNotificationRepository(db).set_enabled(
        user_id, project_id, event_type, allowed=payload.allowed
    )
    return NotificationPreferenceRead.model_validate(preference)


__all__ = ["router"]
