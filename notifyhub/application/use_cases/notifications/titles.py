"""Title formatting for notification mails and feeds."""

from __future__ import annotations

from notifyhub.domain.entities import Commit, Posting, Project, PullRequest, User

_REPLY_PREFIX = "Re: "


def format_commit_reply_title(project: Project, commit: Commit) -> str:
    return f"{_REPLY_PREFIX}[{project.name}] {commit.short_message} ({commit.short_id})"


def format_pull_request_reply_title(pull_request: PullRequest) -> str:
    return _REPLY_PREFIX + format_pull_request_new_title(pull_request)


def format_posting_reply_title(posting: Posting) -> str:
    return _REPLY_PREFIX + format_posting_new_title(posting)


def format_enroll_reply_title(project: Project, user: User) -> str:
    return _REPLY_PREFIX + format_enroll_new_title(project, user)


def format_posting_new_title(posting: Posting) -> str:
    return f"[{posting.project.name}] {posting.title} (#{posting.number})"


def format_pull_request_new_title(pull_request: PullRequest) -> str:
    return (
        f"[{pull_request.to_project.name}] {pull_request.title} (#{pull_request.id})"
    )


def format_enroll_new_title(project: Project, user: User) -> str:
    """Title of a membership request sent to the project's managers."""

    return f"[{project.name}] @{user.login_id} wants to join your project"


__all__ = [
    "format_commit_reply_title",
    "format_enroll_new_title",
    "format_enroll_reply_title",
    "format_posting_new_title",
    "format_posting_reply_title",
    "format_pull_request_new_title",
    "format_pull_request_reply_title",
]
