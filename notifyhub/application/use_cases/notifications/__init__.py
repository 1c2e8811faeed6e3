"""Public helpers for raising and reading notification events."""

from .coalescer import NotificationEventCoalescer
from .events import (
    add_notification_event,
    build_coalescer,
    delete_notification_events_for,
    get_notification_event,
    list_notification_events_for_user,
    notify_mentioned_users,
)
from .locks import KeyedLock
from .mentions import extract_mentioned_login_ids, get_mentioned_users
from .messages import NotificationMessage, render_message, resolve_message
from .titles import (
    format_commit_reply_title,
    format_enroll_new_title,
    format_enroll_reply_title,
    format_posting_new_title,
    format_posting_reply_title,
    format_pull_request_new_title,
    format_pull_request_reply_title,
)

__all__ = [
    "KeyedLock",
    "NotificationEventCoalescer",
    "NotificationMessage",
    "add_notification_event",
    "build_coalescer",
    "delete_notification_events_for",
    "extract_mentioned_login_ids",
    "format_commit_reply_title",
    "format_enroll_new_title",
    "format_enroll_reply_title",
    "format_posting_new_title",
    "format_posting_reply_title",
    "format_pull_request_new_title",
    "format_pull_request_reply_title",
    "get_mentioned_users",
    "get_notification_event",
    "list_notification_events_for_user",
    "notify_mentioned_users",
    "render_message",
    "resolve_message",
]
