"""Resolve the body of a notification event into a message template or text."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import assert_never

from notifyhub.domain.entities import EventType, NotificationEvent, RequestState, State

DEFAULT_CATALOG: Mapping[str, str] = {
    "notification.issue.closed": "The issue has been closed.",
    "notification.issue.reopened": "The issue has been reopened.",
    "notification.issue.unassigned": "The issue is no longer assigned.",
    "notification.issue.assigned": "The issue has been assigned to {0}.",
    "notification.pullrequest.closed": "The pull request has been closed.",
    "notification.pullrequest.rejected": "The pull request has been rejected.",
    "notification.pullrequest.reopened": "The pull request has been reopened.",
    "notification.type.pull.request.merged.conflict": "The pull request has conflicts.",
    "notification.type.pull.request.merged.resolved": "The pull request conflicts are resolved.",
    "notification.member.enroll.request": "A user has asked to join the project.",
    "notification.member.enroll.accept": "The membership request has been accepted.",
    "notification.member.enroll.cancel": "The membership request has been cancelled.",
}


@dataclass(frozen=True)
class NotificationMessage:
    """Either a catalog ``key`` with ``args`` or a verbatim ``text``.

    ``suffix`` is appended after the rendered key, separated by a newline.
    """

    key: str | None = None
    args: tuple[str, ...] = ()
    text: str | None = None
    suffix: str | None = None

    @classmethod
    def verbatim(cls, text: str | None) -> NotificationMessage:
        return cls(text=text)

    def render(self, catalog: Mapping[str, str] = DEFAULT_CATALOG) -> str | None:
        if self.key is None:
            return self.text
        rendered = catalog.get(self.key, self.key).format(*self.args)
        if self.suffix is not None:
            rendered = f"{rendered}\n{self.suffix}"
        return rendered


def resolve_message(event: NotificationEvent) -> NotificationMessage:
    """Select the message describing ``event``.

    An explicit ``event.message`` always wins. "New X" categories carry their
    rendered body in ``new_value`` and are returned verbatim.
    """

    if event.message is not None:
        return NotificationMessage.verbatim(event.message)

    new_value = event.new_value
    event_type = event.event_type
    match event_type:
        case EventType.ISSUE_STATE_CHANGED:
            if new_value == State.CLOSED.value:
                return NotificationMessage(key="notification.issue.closed")
            return NotificationMessage(key="notification.issue.reopened")
        case EventType.ISSUE_ASSIGNEE_CHANGED:
            if new_value is None:
                return NotificationMessage(key="notification.issue.unassigned")
            return NotificationMessage(
                key="notification.issue.assigned", args=(new_value,)
            )
        case (
            EventType.NEW_ISSUE
            | EventType.NEW_POSTING
            | EventType.NEW_COMMENT
            | EventType.NEW_PULL_REQUEST
            | EventType.NEW_SIMPLE_COMMENT
            | EventType.PULL_REQUEST_COMMIT_CHANGED
        ):
            return NotificationMessage.verbatim(new_value)
        case EventType.PULL_REQUEST_STATE_CHANGED:
            if new_value == State.CLOSED.value:
                return NotificationMessage(key="notification.pullrequest.closed")
            if new_value == State.REJECTED.value:
                return NotificationMessage(key="notification.pullrequest.rejected")
            return NotificationMessage(key="notification.pullrequest.reopened")
        case EventType.PULL_REQUEST_MERGED:
            return NotificationMessage(
                key=f"notification.type.pull.request.merged.{new_value}",
                suffix=event.old_value or "",
            )
        case EventType.MEMBER_ENROLL_REQUEST:
            if new_value == RequestState.REQUEST.value:
                return NotificationMessage(key="notification.member.enroll.request")
            if new_value == RequestState.ACCEPT.value:
                return NotificationMessage(key="notification.member.enroll.accept")
            return NotificationMessage(key="notification.member.enroll.cancel")
        case _:
            assert_never(event_type)


def render_message(
    event: NotificationEvent, catalog: Mapping[str, str] = DEFAULT_CATALOG
) -> str | None:
    """Return the human readable body of ``event`` using ``catalog``."""

    return resolve_message(event).render(catalog)


__all__ = [
    "DEFAULT_CATALOG",
    "NotificationMessage",
    "render_message",
    "resolve_message",
]
