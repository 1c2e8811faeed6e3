"""Endpoints to submit, read and purge notification events."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.notifications import (
    add_notification_event,
    delete_notification_events_for,
    get_notification_event,
    list_notification_events_for_user,
    notify_mentioned_users,
    render_message,
)
from notifyhub.domain.entities import NotificationEvent, ResourceType
from notifyhub.domain.exceptions import ResourceNotFoundError
from notifyhub.infrastructure.database import get_db
from notifyhub.interfaces.api.schemas import (
    NotificationEventCreate,
    NotificationEventDeleteResult,
    NotificationEventRead,
)

router = APIRouter(tags=["notification_events"])


def _event_to_schema(event: NotificationEvent) -> NotificationEventRead:
    return NotificationEventRead(
        id=event.id or 0,
        event_type=event.event_type,
        resource_type=event.resource_type,
        resource_id=event.resource_id,
        sender_id=event.sender_id,
        old_value=event.old_value,
        new_value=event.new_value,
        created=event.created,
        receivers=sorted(event.receivers),
        title=event.title,
        message=render_message(event),
        url_to_view=event.url_to_view,
    )


@router.post(
    "/notification-events",
    response_model=NotificationEventRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Event merged away or unaddressed"}},
)
def submit_notification_event(
    payload: NotificationEventCreate,
    db: Session = Depends(get_db),
):
    """Coalesce a raw event and store it when something is left to notify."""

    event = NotificationEvent(
        id=None,
        event_type=payload.event_type,
        resource_type=payload.resource_type,
        resource_id=payload.resource_id,
        sender_id=payload.sender_id,
        old_value=payload.old_value,
        new_value=payload.new_value,
        receivers=payload.unique_receivers(),
        title=payload.title,
        message=payload.message,
        url_to_view=payload.url_to_view,
    )
    try:
        if payload.mention_body is not None:
            saved = notify_mentioned_users(db, event, payload.mention_body)
        else:
            saved = add_notification_event(db, event)
    except ResourceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc

    if saved is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return _event_to_schema(saved)


@router.get("/notification-events/{event_id}", response_model=NotificationEventRead)
def read_notification_event(
    event_id: int,
    db: Session = Depends(get_db),
) -> NotificationEventRead:
    try:
        event = get_notification_event(db, event_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _event_to_schema(event)


@router.get(
    "/users/{user_id}/notification-events",
    response_model=list[NotificationEventRead],
)
def list_user_notification_events(
    user_id: int,
    limit: int = Query(default=50, ge=1, le=500),
    db: Session = Depends(get_db),
) -> list[NotificationEventRead]:
    """Return the most recent events addressed to ``user_id``."""

    events = list_notification_events_for_user(db, user_id, limit=limit)
    return [_event_to_schema(event) for event in events]


@router.delete(
    "/resources/{resource_type}/{resource_id}/notification-events",
    response_model=NotificationEventDeleteResult,
)
def delete_resource_notification_events(
    resource_type: ResourceType,
    resource_id: str,
    db: Session = Depends(get_db),
) -> NotificationEventDeleteResult:
    """Drop every event about a resource that no longer exists."""

    deleted = delete_notification_events_for(db, resource_type, resource_id)
    return NotificationEventDeleteResult(deleted=deleted)


__all__ = ["router"]
