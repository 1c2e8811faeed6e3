"""Domain entity representing a user."""

from dataclasses import dataclass

ANONYMOUS_USER_ID = -1


@dataclass
class User:
    """Core attributes describing a platform user."""

    id: int | None
    login_id: str
    name: str
    email: str | None = None

    def is_anonymous(self) -> bool:
        """Return ``True`` for the placeholder user used for guests."""

        return self.id == ANONYMOUS_USER_ID
