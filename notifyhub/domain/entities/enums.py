"""Closed enumerations shared by notification events."""

from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """Category of a notification event.

    The category decides how ``old_value``/``new_value`` are interpreted and is
    part of the merge key used while coalescing events.
    """

    NEW_ISSUE = "NEW_ISSUE"
    NEW_POSTING = "NEW_POSTING"
    ISSUE_STATE_CHANGED = "ISSUE_STATE_CHANGED"
    ISSUE_ASSIGNEE_CHANGED = "ISSUE_ASSIGNEE_CHANGED"
    NEW_PULL_REQUEST = "NEW_PULL_REQUEST"
    NEW_COMMENT = "NEW_COMMENT"
    NEW_SIMPLE_COMMENT = "NEW_SIMPLE_COMMENT"
    PULL_REQUEST_STATE_CHANGED = "PULL_REQUEST_STATE_CHANGED"
    PULL_REQUEST_COMMIT_CHANGED = "PULL_REQUEST_COMMIT_CHANGED"
    PULL_REQUEST_MERGED = "PULL_REQUEST_MERGED"
    MEMBER_ENROLL_REQUEST = "MEMBER_ENROLL_REQUEST"


class ResourceType(str, Enum):
    """Kind of resource a notification event is about."""

    ISSUE_POST = "ISSUE_POST"
    BOARD_POST = "BOARD_POST"
    ISSUE_COMMENT = "ISSUE_COMMENT"
    NONISSUE_COMMENT = "NONISSUE_COMMENT"
    PULL_REQUEST = "PULL_REQUEST"
    REVIEW_COMMENT = "REVIEW_COMMENT"
    COMMIT = "COMMIT"
    COMMIT_COMMENT = "COMMIT_COMMENT"
    ISSUE_ASSIGNEE = "ISSUE_ASSIGNEE"
    PROJECT = "PROJECT"


class State(str, Enum):
    """Lifecycle states stored in state-change events."""

    OPEN = "open"
    CLOSED = "closed"
    REJECTED = "rejected"
    MERGED = "merged"
    CONFLICT = "conflict"
    RESOLVED = "resolved"


class RequestState(str, Enum):
    """States of a project membership request."""

    REQUEST = "REQUEST"
    ACCEPT = "ACCEPT"
    CANCEL = "CANCEL"
    REJECT = "REJECT"


__all__ = ["EventType", "RequestState", "ResourceType", "State"]
