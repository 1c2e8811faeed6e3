"""Extraction of ``@login`` mentions from free text."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from notifyhub.domain.entities import User

LOGIN_ID_PATTERN: Final[str] = r"[a-zA-Z0-9-]+(?:[_.][a-zA-Z0-9-]+)*"
_MENTION_PATTERN: Final[re.Pattern[str]] = re.compile("@(" + LOGIN_ID_PATTERN + ")")


def extract_mentioned_login_ids(body: str | None) -> set[str]:
    """Return the login ids mentioned as ``@login`` in ``body``."""

    if not body:
        return set()
    return {match.group(1) for match in _MENTION_PATTERN.finditer(body)}


def get_mentioned_users(
    body: str | None, lookup: Callable[[str], User | None]
) -> set[int]:
    """Resolve the users mentioned in ``body`` to their identifiers.

    ``lookup`` maps a login id to a user; unknown logins and the anonymous user
    are left out.
    """

    user_ids: set[int] = set()
    for login_id in extract_mentioned_login_ids(body):
        user = lookup(login_id)
        if user is None or user.id is None or user.is_anonymous():
            continue
        user_ids.add(user.id)
    return user_ids


__all__ = ["LOGIN_ID_PATTERN", "extract_mentioned_login_ids", "get_mentioned_users"]
